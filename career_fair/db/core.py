#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Basic helpers for talking to the bundled SQLite database.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, List, Any, Optional

import pandas as pd
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from career_fair.utils.logger import get_logger
from career_fair.utils.config import Config

logger = get_logger("db.core")


class DatabaseNotFoundError(FileNotFoundError):
    pass


def get_connection_string(db_path=None):
    """
    Build the SQLAlchemy URL for the SQLite file

    Args:
        db_path: Path to the database file, defaults to Config.Database.PATH

    Returns:
        str: Connection string
    """
    path = os.path.abspath(str(db_path or Config.Database.PATH))
    return f"sqlite:///{path}"


def get_sqlite_uri(db_path=None, read_only=True):
    """
    Build the sqlite3 URI used to open the file

    The path is percent-encoded, so names containing '#', '?' or '%'
    reach SQLite unchanged.

    Args:
        db_path: Path to the database file, defaults to Config.Database.PATH
        read_only (bool): Open the file with mode=ro

    Returns:
        str: file: URI
    """
    uri = Path(os.path.abspath(str(db_path or Config.Database.PATH))).as_uri()
    if read_only:
        return f"{uri}?mode=ro"
    return uri


def get_engine(db_path=None, read_only=True, echo=None) -> Engine:
    """
    Create a SQLAlchemy engine for the SQLite file

    The file must already exist; SQLite would otherwise create an empty
    database and every query would fail later with "no such table".

    Args:
        db_path: Path to the database file, defaults to Config.Database.PATH
        read_only (bool): Open the file with mode=ro
        echo (bool): Log emitted SQL, defaults to Config.Database.ECHO_SQL

    Returns:
        sqlalchemy.engine.Engine: SQLAlchemy engine
    """
    path = db_path or Config.Database.PATH
    if not os.path.isfile(path):
        logger.error(f"Database file not found: {path}")
        raise DatabaseNotFoundError(f"Database file not found: {path}")

    if echo is None:
        echo = Config.Database.ECHO_SQL

    uri = get_sqlite_uri(path, read_only=read_only)

    def connect():
        # Connections are handed between threads by the pool
        return sqlite3.connect(uri, uri=True, check_same_thread=False)

    logger.info(f"Opening database: {path}")
    return create_engine(get_connection_string(path), creator=connect, echo=echo)


@contextmanager
def get_connection(engine: Engine):
    """
    Context manager handing out a connection from the engine

    Args:
        engine: SQLAlchemy engine

    Yields:
        connection: Database connection
    """
    with engine.connect() as conn:
        try:
            yield conn
        except SQLAlchemyError as e:
            logger.error(f"Database error: {type(e).__name__}: {e}")
            raise


def execute_query(engine: Engine, query: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """
    Run a SELECT and return its rows

    Args:
        engine: SQLAlchemy engine
        query (str): SQL text with :name placeholders
        params (dict, optional): Bound values

    Returns:
        list: One dict per row, keyed by column label
    """
    with get_connection(engine) as conn:
        result = conn.execute(text(query), params or {})
        return [dict(row) for row in result.mappings()]


def fetch_column(engine: Engine, query: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Run a SELECT and return the first column of every row

    Args:
        engine: SQLAlchemy engine
        query (str): SQL text with :name placeholders
        params (dict, optional): Bound values

    Returns:
        list: First-column values in row order
    """
    with get_connection(engine) as conn:
        return list(conn.execute(text(query), params or {}).scalars())


def get_dataframe(engine: Engine, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
    """
    Run a SELECT and return a DataFrame

    Args:
        engine: SQLAlchemy engine
        query (str): SQL text with :name placeholders
        params (dict, optional): Bound values

    Returns:
        pandas.DataFrame: Query result
    """
    with get_connection(engine) as conn:
        return pd.read_sql(text(query), conn, params=params or {})


def table_exists(engine: Engine, table_name: str) -> bool:
    """
    Check whether a table exists in the database

    Args:
        engine: SQLAlchemy engine
        table_name (str): Table name

    Returns:
        bool: True if the table exists
    """
    query = "SELECT COUNT(*) FROM sqlite_master WHERE type = 'table' AND name = :name"
    with get_connection(engine) as conn:
        return bool(conn.execute(text(query), {"name": table_name}).scalar())
