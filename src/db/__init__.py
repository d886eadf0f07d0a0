"""Database module for the shareholder letter store."""

from .session import create_db_engine, get_database_url

__all__ = [
    "create_db_engine",
    "get_database_url",
]
