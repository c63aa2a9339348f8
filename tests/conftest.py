"""
Shared fixtures for ledger tests.
"""

import pytest

from herbledger.core.errors import StoreFailure
from herbledger.core.store import InMemoryRecordStore, SqliteRecordStore


class FailingRecordStore(InMemoryRecordStore):
    """In-memory store whose writes and scans report store errors."""

    def __init__(self, fail_put: bool = True, fail_scan: bool = True):
        super().__init__()
        self.fail_put = fail_put
        self.fail_scan = fail_scan
        self.put_attempts = []

    def put(self, key, value):
        self.put_attempts.append(key)
        if self.fail_put:
            raise StoreFailure("disk full", key=key)
        super().put(key, value)

    def scan(self, start_key, end_key):
        if self.fail_scan:
            raise StoreFailure("iterator unavailable")
        return super().scan(start_key, end_key)


@pytest.fixture
def memory_store():
    return InMemoryRecordStore()


@pytest.fixture
def sqlite_store(tmp_path):
    return SqliteRecordStore(str(tmp_path / "world_state.db"))


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Run the test against each store implementation."""
    if request.param == "memory":
        return InMemoryRecordStore()
    return SqliteRecordStore(str(tmp_path / "world_state.db"))


@pytest.fixture
def failing_store():
    return FailingRecordStore()
