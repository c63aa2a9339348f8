"""
Record store adapter - ordered key-value interface over the world state.
Point get, point put and lexicographic range scan; nothing else is assumed.
"""

import sqlite3
from abc import ABC, abstractmethod
from typing import Dict, Iterator, Optional, Tuple

from .db import get_db, init_db
from .errors import StoreFailure

ResultRow = Tuple[str, bytes]


class IRecordStore(ABC):
    """Abstract interface for ordered key-value record storage."""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the stored bytes for key, or None if absent."""
        pass

    @abstractmethod
    def put(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def scan(self, start_key: str, end_key: str) -> Iterator[ResultRow]:
        """Iterate (key, value) rows with start_key <= key < end_key in key order.

        The returned iterator must be closed by the caller; closing releases
        any resources held by the scan, even before exhaustion.
        """
        pass


class InMemoryRecordStore(IRecordStore):
    """Dict-backed implementation of IRecordStore."""

    def __init__(self):
        self._entries: Dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._entries.get(key)

    def put(self, key: str, value: bytes) -> None:
        self._entries[key] = bytes(value)

    def scan(self, start_key: str, end_key: str) -> Iterator[ResultRow]:
        # Snapshot at call time so writes during iteration are not observed
        rows = [
            (key, self._entries[key])
            for key in sorted(self._entries)
            if start_key <= key < end_key
        ]
        return (row for row in rows)

    def count(self) -> int:
        """Count stored records."""
        return len(self._entries)


class SqliteRecordStore(IRecordStore):
    """SQLite implementation of IRecordStore backed by the world_state table."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        try:
            init_db(db_path)
        except sqlite3.Error as e:
            raise StoreFailure(f"Failed to open world state at {db_path}: {e}") from e

    def get(self, key: str) -> Optional[bytes]:
        try:
            with get_db(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT value FROM world_state WHERE key = ?", (key,))
                row = cursor.fetchone()
                return bytes(row[0]) if row else None
        except sqlite3.Error as e:
            raise StoreFailure(f"Failed to read key {key}: {e}", key=key) from e

    def put(self, key: str, value: bytes) -> None:
        try:
            with get_db(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT INTO world_state (key, value) VALUES (?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, sqlite3.Binary(value))
                )
                conn.commit()
        except sqlite3.Error as e:
            raise StoreFailure(f"Failed to write key {key}: {e}", key=key) from e

    def scan(self, start_key: str, end_key: str) -> Iterator[ResultRow]:
        return self._scan(start_key, end_key)

    def _scan(self, start_key: str, end_key: str) -> Iterator[ResultRow]:
        try:
            with get_db(self.db_path) as conn:
                cursor = conn.execute(
                    "SELECT key, value FROM world_state WHERE key >= ? AND key < ? ORDER BY key",
                    (start_key, end_key)
                )
                try:
                    for key, value in cursor:
                        yield key, bytes(value)
                finally:
                    cursor.close()
        except sqlite3.Error as e:
            raise StoreFailure(f"Range scan {start_key}..{end_key} failed: {e}") from e

    def count(self) -> int:
        """Count stored records."""
        try:
            with get_db(self.db_path) as conn:
                cursor = conn.cursor()
                cursor.execute("SELECT COUNT(*) FROM world_state")
                result = cursor.fetchone()
                return result[0] if result else 0
        except sqlite3.Error as e:
            raise StoreFailure(f"Failed to count world state: {e}") from e
