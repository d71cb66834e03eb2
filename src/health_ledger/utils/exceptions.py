"""Custom exceptions for the Health Ledger contracts."""

from typing import Any, Optional


class HealthLedgerException(Exception):
    """Base exception for all Health Ledger exceptions."""

    def __init__(self, message: str, code: Optional[str] = None):
        """Initialize exception.

        Args:
            message: Error message
            code: Optional error code
        """
        super().__init__(message)
        self.code = code


class ConfigurationError(HealthLedgerException):
    """Raised when settings are invalid or inconsistent."""

    def __init__(self, message: str = "Invalid configuration"):
        """Initialize ConfigurationError."""
        super().__init__(message, "CONFIGURATION_ERROR")


class RecordNotFoundError(HealthLedgerException):
    """Raised when a record table has no entry for the requested key."""

    def __init__(self, key: Any, table: str = "records"):
        """Initialize RecordNotFoundError."""
        super().__init__(f"No record {key!r} in {table}", "RECORD_NOT_FOUND")
        self.key = key
        self.table = table
