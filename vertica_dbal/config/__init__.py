"""Convenient access to connection settings and constants."""

from .parameters import ConnectionParameters, DriverOptions
from .settings import (
    Settings,
    VerticaConstants,
    get_settings,
    load_config_from_file,
    settings,
)

__all__ = [
    "settings",
    "Settings",
    "get_settings",
    "load_config_from_file",
    "VerticaConstants",
    "ConnectionParameters",
    "DriverOptions",
]
