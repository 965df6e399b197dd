"""Exception types raised by the Vertica driver."""

from __future__ import annotations

from typing import Optional


class VerticaDBALError(Exception):
    """Base exception for driver operations."""


class ConfigError(VerticaDBALError):
    """Raised when required configuration is missing or invalid."""


class ConnectionFailed(VerticaDBALError):
    """Raised when the ODBC layer refuses to open a connection.

    ``str()`` is the driver's own diagnostic; the original exception is kept
    on ``original_error`` and chained as ``__cause__`` by the driver.
    """

    def __init__(self, original_error: Exception, dsn: Optional[str] = None):
        self.original_error = original_error
        self.dsn = dsn
        self.message = str(original_error)
        super().__init__(self.message)


__all__ = ["VerticaDBALError", "ConfigError", "ConnectionFailed"]
