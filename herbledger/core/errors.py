"""Ledger error taxonomy.

Every failure an operation can report derives from LedgerError. The message
is what the caller sees; details carry structured context for logging.
"""

from typing import Any, Dict, Optional


class LedgerError(Exception):
    """Base exception for all ledger failures."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ArgumentCountError(LedgerError):
    """Raised when an operation receives the wrong number of arguments."""

    def __init__(self, expected: int, received: int):
        super().__init__(
            f"Incorrect number of arguments. Expecting {expected}",
            details={"expected": expected, "received": received},
        )
        self.expected = expected
        self.received = received


class NotLocated(LedgerError):
    """Raised when a requested key is absent from the store."""

    def __init__(self, key: str):
        super().__init__("Could not locate herb", details={"key": key})
        self.key = key


class StoreFailure(LedgerError):
    """Raised when the underlying store reports an error."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message, details={"key": key} if key is not None else None)
        self.key = key


class DecodeFailure(LedgerError):
    """Raised when stored bytes are not a valid record document."""

    pass
