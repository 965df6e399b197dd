"""Typed connection parameters accepted by the DSN builder and driver."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class DriverOptions(BaseModel):
    """Vendor options nested under ``driverOptions``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    odbc_driver: Optional[str] = None
    dsn_settings: Optional[str] = None
    schema_name: Optional[str] = Field(default=None, alias="schema")
    connection_settings: Optional[str] = None


class ConnectionParameters(BaseModel):
    """Connection coordinates for a single connection attempt.

    ``None`` values are treated the same as missing keys and unknown keys are
    dropped, so loosely built mappings validate deterministically.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    dsn: Optional[str] = None
    host: Optional[str] = None
    port: Optional[Union[int, str]] = None
    dbname: Optional[str] = None
    driver_options: Optional[DriverOptions] = Field(default=None, alias="driverOptions")

    @classmethod
    def coerce(cls, params: Union["ConnectionParameters", Mapping[str, Any], None]) -> "ConnectionParameters":
        """Return ``params`` as a :class:`ConnectionParameters` instance."""
        if params is None:
            return cls()
        if isinstance(params, cls):
            return params
        return cls.model_validate(dict(params))

    def with_driver_options(
        self, options: Union[DriverOptions, Mapping[str, Any], None]
    ) -> "ConnectionParameters":
        """Return a copy using ``options`` when no driver options are set yet."""
        if options is None or self.driver_options is not None:
            return self
        if not isinstance(options, DriverOptions):
            options = DriverOptions.model_validate(dict(options))
        return self.model_copy(update={"driver_options": options})


__all__ = ["ConnectionParameters", "DriverOptions"]
