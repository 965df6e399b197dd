"""Driver facade tying the DSN builder to an ODBC connection opener."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from ..config.parameters import ConnectionParameters, DriverOptions
from ..config.settings import VerticaConstants
from ..utils.logging_helper import record_failure, record_success
from .connections import ConnectionOpener, PyodbcConnectionOpener, VerticaConnection
from .dialect import VerticaDialect
from .dsn import build_dsn, mask_dsn
from .errors import ConnectionFailed
from .schema import VerticaSchemaManager

logger = logging.getLogger(__name__)


class VerticaDriver:
    """Driver for `Vertica <https://www.vertica.com/>`_ over ODBC.

    ``opener`` performs the actual connection; it defaults to pyodbc and can
    be swapped for anything implementing :class:`ConnectionOpener`.
    """

    name = "vertica"

    def __init__(self, opener: Optional[ConnectionOpener] = None) -> None:
        self.opener = opener if opener is not None else PyodbcConnectionOpener()

    def connect(
        self,
        params: Union[ConnectionParameters, Mapping[str, Any]],
        username: Optional[str] = None,
        password: Optional[str] = None,
        driver_options: Union[DriverOptions, Mapping[str, Any], None] = None,
    ) -> VerticaConnection:
        """Open a connection for ``params``.

        Args:
            params: Connection parameters.  A non-empty ``dsn`` overrides the
                host, port, dbname and driver options.
            username: User passed to the ODBC layer as ``UID``.
            password: Password passed to the ODBC layer as ``PWD``.
            driver_options: Used when ``params`` has no ``driverOptions``.

        Raises:
            ConnectionFailed: The ODBC layer rejected the connection.
        """
        params = ConnectionParameters.coerce(params).with_driver_options(driver_options)
        dsn = build_dsn(params)
        logger.info("Connecting to Vertica: %s", mask_dsn(dsn))
        try:
            dbapi_connection = self.opener.open(dsn, username, password)
        except Exception as exc:
            record_failure()
            logger.error("Vertica connection failed: %s", exc)
            raise ConnectionFailed(exc, dsn=dsn) from exc
        record_success()
        return VerticaConnection(dbapi_connection, params)

    def get_database_platform(self) -> VerticaDialect:
        return VerticaDialect()

    def get_schema_manager(self, connection: VerticaConnection) -> VerticaSchemaManager:
        return VerticaSchemaManager(connection)

    def get_name(self) -> str:
        return self.name

    def get_database(self, connection: VerticaConnection) -> Optional[str]:
        """Return the configured database name or ask the server for it."""
        params = connection.params
        if params.dbname is not None:
            return params.dbname

        return connection.fetch_column(VerticaConstants.CURRENT_DATABASE_SQL)


__all__ = ["VerticaDriver"]
