"""Vertica adapter for SQLAlchemy and plain DBAPI callers over ODBC."""

from .config import ConnectionParameters, DriverOptions
from .db import (
    ConnectionFailed,
    VerticaConnection,
    VerticaDialect,
    VerticaDriver,
    build_dsn,
)

__version__ = "0.1.0"

__all__ = [
    "build_dsn",
    "ConnectionParameters",
    "DriverOptions",
    "VerticaDriver",
    "VerticaConnection",
    "VerticaDialect",
    "ConnectionFailed",
]
