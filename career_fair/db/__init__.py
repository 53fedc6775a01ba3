"""
Database package for the career fair directory.
Holds the helpers that open and query the embedded SQLite file.
"""

from career_fair.db.core import (
    DatabaseNotFoundError,
    get_engine,
    get_connection,
    execute_query,
    fetch_column,
    get_dataframe,
    table_exists,
)

__all__ = [
    'DatabaseNotFoundError',
    'get_engine',
    'get_connection',
    'execute_query',
    'fetch_column',
    'get_dataframe',
    'table_exists',
]
