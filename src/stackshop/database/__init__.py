"""
Database module for the Stackshop backend
"""

from .connection import close_database, ensure_indexes, get_database, init_database

__all__ = ["close_database", "ensure_indexes", "get_database", "init_database"]
