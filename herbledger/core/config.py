"""
Ledger configuration - flat environment settings.
Values come from the process environment, optionally seeded from a .env file.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# World state location
DB_PATH = os.getenv("DB_PATH", "./data/herbledger.db")

# Store provider for the world state
STORE_PROVIDER = os.getenv("STORE_PROVIDER", "sqlite")  # sqlite|memory

# Fixed bounds used by the list-range query
RANGE_START_KEY = os.getenv("RANGE_START_KEY", "0")
RANGE_END_KEY = os.getenv("RANGE_END_KEY", "999")

# Custody transfer refuses to rewrite records whose stored bytes do not decode
DECODE_STRICT = os.getenv("DECODE_STRICT", "true").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

VALID_STORE_PROVIDERS = ["sqlite", "memory"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_store():
    """Get the configured record store implementation."""
    if STORE_PROVIDER == "memory":
        from .store import InMemoryRecordStore
        return InMemoryRecordStore()

    from .store import SqliteRecordStore
    return SqliteRecordStore(DB_PATH)


def debug_enabled():
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def is_decode_strict():
    """Check if custody transfer fails on malformed stored records."""
    return DECODE_STRICT


def get_scan_bounds():
    """Get (start, end) key bounds for the list-range query."""
    return RANGE_START_KEY, RANGE_END_KEY


def ensure_db_directory(db_path: str = None):
    """Ensure the database directory exists."""
    Path(db_path or DB_PATH).parent.mkdir(parents=True, exist_ok=True)


def validate_config():
    """Validate ledger configuration and return any issues."""
    issues = []

    if STORE_PROVIDER not in VALID_STORE_PROVIDERS:
        issues.append(f"Invalid STORE_PROVIDER: {STORE_PROVIDER}")

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        issues.append(f"Invalid LOG_LEVEL: {LOG_LEVEL}")

    if not RANGE_START_KEY or not RANGE_END_KEY:
        issues.append("RANGE_START_KEY and RANGE_END_KEY must not be empty")
    elif RANGE_START_KEY >= RANGE_END_KEY:
        issues.append("RANGE_START_KEY must sort before RANGE_END_KEY")

    return issues
