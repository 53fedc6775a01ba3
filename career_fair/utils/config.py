#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Central configuration for the career fair directory.
Settings are grouped into namespaces; environment variables (and a local
.env file, if present) override the defaults.
"""

import os
from pathlib import Path
from typing import Dict, Any

from dotenv import load_dotenv

from career_fair.utils.path_helpers import ensure_path

load_dotenv(override=False)

BASE_DIR = Path(__file__).resolve().parent.parent.parent


def _getenv_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class Config:
    """Configuration namespaces for the directory data layer"""

    BASE_DIR = BASE_DIR

    class Dirs:
        """Directory paths"""
        LOGS_DIR = ensure_path(os.getenv("CAREER_FAIR_LOGS_DIR", str(BASE_DIR / "logs")))

    class Database:
        """Embedded SQLite database"""
        NAME = "careerFairDB.db"
        PATH = os.getenv("CAREER_FAIR_DB_PATH", str(BASE_DIR / "data" / NAME))
        ECHO_SQL = _getenv_bool("CAREER_FAIR_ECHO_SQL")

        @classmethod
        def get_connection_params(cls) -> Dict[str, Any]:
            """Connection parameters for the database file"""
            return {
                "path": cls.PATH,
                "echo": cls.ECHO_SQL,
            }

    class Logging:
        """Logging settings"""
        LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        TO_FILE = _getenv_bool("LOG_TO_FILE")

    class Directory:
        """Venue and data set constants"""
        ROOMS = ("Wood", "Multipurpose", "Hall")
        # Major abbreviation meaning "recruits every major"
        ALL_MAJORS_ABBREVIATION = "ALL"
        # Work-auth / employment type meaning "not specified"
        BLANK_TYPE = ""


def get_config(section, key=None, default=None):
    """Look up a config value by section and key"""
    config_map = {
        'db': Config.Database.get_connection_params(),
        'logging': {
            'level': Config.Logging.LEVEL,
            'to_file': Config.Logging.TO_FILE,
        },
        'directory': {
            'rooms': Config.Directory.ROOMS,
            'all_majors_abbreviation': Config.Directory.ALL_MAJORS_ABBREVIATION,
            'blank_type': Config.Directory.BLANK_TYPE,
        },
    }

    if section not in config_map:
        return default

    if key is None:
        return config_map[section]

    return config_map[section].get(key, default)
