"""
Ledger world state - SQLite foundation.
"""

import sqlite3
from contextlib import contextmanager
from typing import Generator, Optional
from . import config


@contextmanager
def get_db(db_path: Optional[str] = None) -> Generator[sqlite3.Connection, None, None]:
    """Get a SQLite database connection."""
    conn = sqlite3.connect(db_path or config.DB_PATH)
    try:
        yield conn
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None):
    """Initialize the database with required tables."""
    config.ensure_db_directory(db_path)
    with get_db(db_path) as conn:
        cursor = conn.cursor()

        # One row per record; BINARY collation keeps range scans byte-ordered
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS world_state (
                key TEXT PRIMARY KEY COLLATE BINARY,
                value BLOB NOT NULL
            )
        ''')

        conn.commit()


def health_check(db_path: Optional[str] = None):
    """Check database health."""
    try:
        with get_db(db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT name FROM sqlite_master WHERE type='table';")
            table_names = [table[0] for table in cursor.fetchall()]
            return "world_state" in table_names
    except sqlite3.Error:
        return False
