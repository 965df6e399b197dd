"""ODBC connection string construction for the Vertica driver.

The output follows the ``Key=Value;`` layout understood by the Vertica ODBC
driver.  ``ConnSettings`` is the one value that may itself contain SQL, so its
semicolons and spaces are escaped before being embedded.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from ..config.parameters import ConnectionParameters, DriverOptions
from ..config.settings import VerticaConstants

ParamsLike = Union[ConnectionParameters, Mapping[str, Any]]


def escape_connection_settings(text: str) -> str:
    """Escape ``;`` and spaces so ``text`` survives inside a DSN value."""
    return text.replace(";", VerticaConstants.SETTINGS_SEMICOLON).replace(" ", "+")


def connection_settings_fragment(options: DriverOptions) -> str:
    """Return the ``ConnSettings=...;`` fragment, possibly with an empty value."""
    settings = []
    if options.schema_name:
        settings.append(f"SET search_path='{options.schema_name}'")
    if options.connection_settings:
        settings.append(options.connection_settings)

    return f"ConnSettings={escape_connection_settings(';'.join(settings))};"


def driver_options_fragment(options: Optional[DriverOptions]) -> str:
    """Return the driver, raw settings and ``ConnSettings`` fragments."""
    if options is None:
        return ""

    driver = options.odbc_driver or VerticaConstants.DEFAULT_ODBC_DRIVER
    fragment = f"Driver={driver};"
    if options.dsn_settings:
        fragment += options.dsn_settings.rstrip(";") + ";"
    fragment += connection_settings_fragment(options)
    return fragment


def build_dsn(params: ParamsLike) -> str:
    """Build an ODBC DSN from connection parameters.

    A non-empty ``dsn`` is returned verbatim and every other field is ignored.
    Otherwise ``Servername``, ``Port`` and ``Database`` are emitted in that
    order for the keys that are present, followed by the driver options.
    """
    params = ConnectionParameters.coerce(params)
    if params.dsn:
        return params.dsn

    dsn = ""
    if params.host is not None:
        dsn += f"Servername={params.host};"
    if params.port is not None:
        dsn += f"Port={params.port};"
    if params.dbname is not None:
        dsn += f"Database={params.dbname};"
    dsn += driver_options_fragment(params.driver_options)
    return dsn


def mask_dsn(dsn: str) -> str:
    """Return ``dsn`` with password values replaced for logging."""
    parts = []
    for part in dsn.split(";"):
        key, sep, _ = part.partition("=")
        if sep and key.strip().lower() in ("pwd", "password"):
            part = f"{key}=***"
        parts.append(part)
    return ";".join(parts)


__all__ = [
    "build_dsn",
    "connection_settings_fragment",
    "driver_options_fragment",
    "escape_connection_settings",
    "mask_dsn",
]
