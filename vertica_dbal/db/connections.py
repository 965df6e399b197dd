from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

import sqlalchemy
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import NullPool

from .. import config
from ..config.parameters import ConnectionParameters
from ..config.settings import Settings, VerticaConstants
from .dsn import build_dsn
from .errors import ConfigError

logger = logging.getLogger(__name__)

Engine = Any  # runtime fallback for type hints
Connection = Any
DBAPIConnection = Any

_engines: dict[str, Engine] = {}


@runtime_checkable
class ConnectionOpener(Protocol):
    """Opens a DBAPI connection for an ODBC connection string."""

    def open(
        self, dsn: str, username: Optional[str] = None, password: Optional[str] = None
    ) -> DBAPIConnection:
        ...


class PyodbcConnectionOpener:
    """Open connections through :func:`pyodbc.connect`.

    ``pyodbc`` is imported on first use since loading it requires the native
    ODBC driver manager.
    """

    def __init__(self, timeout: int = VerticaConstants.CONNECTION_TIMEOUT, autocommit: bool = False) -> None:
        self.timeout = timeout
        self.autocommit = autocommit

    def open(
        self, dsn: str, username: Optional[str] = None, password: Optional[str] = None
    ) -> DBAPIConnection:
        import pyodbc

        kwargs: Dict[str, Any] = {"timeout": self.timeout, "autocommit": self.autocommit}
        # pyodbc appends unknown keywords to the connection string as UID=/PWD=
        if username is not None:
            kwargs["uid"] = username
        if password is not None:
            kwargs["pwd"] = password
        return pyodbc.connect(dsn, **kwargs)


class VerticaConnection:
    """Connection handle returned by :class:`~vertica_dbal.db.driver.VerticaDriver`."""

    def __init__(self, dbapi_connection: DBAPIConnection, params: ConnectionParameters) -> None:
        self.dbapi_connection = dbapi_connection
        self.params = params
        self.closed = False

    def __enter__(self) -> "VerticaConnection":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def cursor(self) -> Any:
        return self.dbapi_connection.cursor()

    def execute(self, sql: str, parameters: Sequence[Any] = ()) -> Any:
        """Execute ``sql`` and return the open cursor."""
        cursor = self.cursor()
        try:
            if parameters:
                cursor.execute(sql, tuple(parameters))
            else:
                cursor.execute(sql)
        except Exception:
            cursor.close()
            raise
        return cursor

    def fetch_all(self, sql: str, parameters: Sequence[Any] = ()) -> list:
        cursor = self.execute(sql, parameters)
        try:
            return list(cursor.fetchall())
        finally:
            cursor.close()

    def fetch_column(self, sql: str, parameters: Sequence[Any] = ()) -> Any:
        """Return the first column of the first row, or ``None`` if no rows."""
        cursor = self.execute(sql, parameters)
        try:
            row = cursor.fetchone()
        finally:
            cursor.close()
        return row[0] if row else None

    def close(self) -> None:
        if self.closed:
            return
        self.dbapi_connection.close()
        self.closed = True


def _is_url_port(port: Union[int, str, None]) -> bool:
    # URL ports must be plain integers; anything else only fits inside the DSN
    return port is None or str(port).isdigit()


def build_vertica_url(
    params: Union[ConnectionParameters, Mapping[str, Any]],
    username: Optional[str] = None,
    password: Optional[str] = None,
) -> URL:
    """Return an SQLAlchemy URL for the ``vertica+pyodbc`` dialect."""
    params = ConnectionParameters.coerce(params)
    if params.dsn or not _is_url_port(params.port):
        return URL.create(
            "vertica+pyodbc",
            username=username,
            password=password,
            query={"odbc_connect": build_dsn(params)},
        )

    query: Dict[str, str] = {}
    options = params.driver_options
    if options is not None:
        query["odbc_driver"] = options.odbc_driver or VerticaConstants.DEFAULT_ODBC_DRIVER
        for key, value in (
            ("dsn_settings", options.dsn_settings),
            ("schema", options.schema_name),
            ("connection_settings", options.connection_settings),
        ):
            if value:
                query[key] = value

    return URL.create(
        "vertica+pyodbc",
        username=username,
        password=password,
        host=params.host,
        port=int(params.port) if params.port is not None else None,
        database=params.dbname,
        query=query,
    )


def get_engine(url: URL | str) -> Engine:
    """Return (and cache) an unpooled SQLAlchemy engine for ``url``."""
    key = make_url(url).render_as_string(hide_password=False)
    engine = _engines.get(key)
    if engine is None:
        logger.debug("Creating engine for %s", make_url(url))
        engine = sqlalchemy.create_engine(url, poolclass=NullPool)
        _engines[key] = engine
    return engine


def get_connection(url: URL | str) -> Connection:
    """Return a SQLAlchemy connection for ``url``."""
    return get_engine(url).connect()


def get_vertica_connection(settings: Optional[Settings] = None) -> Connection:
    """Connect using the configured Vertica settings."""
    settings = settings or config.settings
    if not (settings.dsn or settings.host):
        raise ConfigError("Missing Vertica connection parameters: set VERTICA_DSN or VERTICA_HOST.")
    url = build_vertica_url(
        settings.connection_parameters(),
        username=settings.user,
        password=settings.password_value,
    )
    return get_connection(url)


__all__ = [
    "ConnectionOpener",
    "PyodbcConnectionOpener",
    "VerticaConnection",
    "build_vertica_url",
    "get_engine",
    "get_connection",
    "get_vertica_connection",
]
