"""Vertica connection utilities."""

from .connections import (
    ConnectionOpener,
    PyodbcConnectionOpener,
    VerticaConnection,
    build_vertica_url,
    get_connection,
    get_engine,
    get_vertica_connection,
)
from .dialect import VerticaDialect
from .driver import VerticaDriver
from .dsn import build_dsn
from .errors import ConfigError, ConnectionFailed, VerticaDBALError
from .health import check_configured_connection, check_connection
from .schema import ColumnInfo, VerticaSchemaManager

__all__ = [
    "build_dsn",
    "ConnectionOpener",
    "PyodbcConnectionOpener",
    "VerticaConnection",
    "VerticaDriver",
    "VerticaDialect",
    "VerticaSchemaManager",
    "ColumnInfo",
    "build_vertica_url",
    "get_engine",
    "get_connection",
    "get_vertica_connection",
    "check_connection",
    "check_configured_connection",
    "VerticaDBALError",
    "ConnectionFailed",
    "ConfigError",
]
