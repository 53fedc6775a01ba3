#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Path helpers so every module treats file system paths the same way.
"""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def ensure_path(path: PathLike) -> Path:
    """
    Make sure the input is a Path object.

    Args:
        path: Path as a string or Path object

    Returns:
        Path: Path object
    """
    if isinstance(path, str):
        return Path(path)
    return path


def ensure_dir(path: PathLike) -> Path:
    """
    Make sure a directory exists and return it as a Path.

    Args:
        path: Path as a string or Path object

    Returns:
        Path: Path object for the created directory
    """
    path = ensure_path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
