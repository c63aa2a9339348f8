"""
Structured logging for ledger operations.
"""

import logging
from typing import Any, Dict

from ..core.config import LOG_LEVEL, VALID_LOG_LEVELS


class StructuredLogger:
    """Structured logger for record operations, range scans and dispatch."""

    def __init__(self, name: str = "herbledger"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(LOG_LEVEL if LOG_LEVEL in VALID_LOG_LEVELS else logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        if status == "failed":
            self.logger.error(message)
        else:
            self.logger.info(message)

    def log_record_operation(self, operation: str, key: str, value: str = None, status: str = "success", details: Dict[str, Any] = None):
        """Log a record-level operation."""
        log_details = {"key": key}
        if value is not None:
            log_details["value"] = value[:50] + "..." if len(value) > 50 else value
        if details:
            log_details.update(details)

        self.log_operation(f"record.{operation}", status, log_details)

    def log_range_scan(self, start_key: str, end_key: str, count: int, status: str = "success"):
        """Log a completed or failed range scan."""
        self.log_operation("record.scan", status, {
            "start_key": start_key,
            "end_key": end_key,
            "rows": count
        })

    def log_dispatch(self, function: str, status: str, details: Dict[str, Any] = None):
        """Log contract dispatch outcome."""
        log_details = {"function": function}
        if details:
            log_details.update(details)

        self.log_operation("contract.invoke", status, log_details)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def debug(self, message: str):
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()


def log_record_operation(operation: str, key: str, value: str = None, status: str = "success", details: Dict[str, Any] = None):
    """Log a record-level operation."""
    logger.log_record_operation(operation, key, value, status, details)


def log_range_scan(start_key: str, end_key: str, count: int, status: str = "success"):
    """Log a range scan."""
    logger.log_range_scan(start_key, end_key, count, status)


def log_dispatch(function: str, status: str, details: Dict[str, Any] = None):
    """Log contract dispatch outcome."""
    logger.log_dispatch(function, status, details)
