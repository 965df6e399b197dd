from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .parameters import ConnectionParameters, DriverOptions

logger = logging.getLogger(__name__)

# Load environment variables from a .env file if present.
load_dotenv()

DEFAULT_CONFIG_FILE = "config/vertica_config.json"


class VerticaConstants:
    """Default values used by the driver."""
    DEFAULT_ODBC_DRIVER = "Vertica"
    CONNECTION_TIMEOUT = 30
    SETTINGS_SEMICOLON = "%3B"
    CURRENT_DATABASE_SQL = "SELECT CURRENT_DATABASE()"
    CURRENT_SCHEMA_SQL = "SELECT CURRENT_SCHEMA()"


class Settings(BaseSettings):
    """Connection configuration read from ``VERTICA_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="VERTICA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Connection coordinates
    dsn: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    dbname: Optional[str] = None
    user: Optional[str] = None
    password: Optional[SecretStr] = None

    # Driver options
    odbc_driver: Optional[str] = None
    dsn_settings: Optional[str] = None
    schema_name: Optional[str] = None
    connection_settings: Optional[str] = None

    # Runtime
    connection_timeout: int = Field(default=VerticaConstants.CONNECTION_TIMEOUT)
    metrics_port: Optional[int] = None

    def driver_options(self) -> Optional[DriverOptions]:
        """Return the configured driver options, or ``None`` when none are set."""
        values = {
            "odbc_driver": self.odbc_driver,
            "dsn_settings": self.dsn_settings,
            "schema": self.schema_name,
            "connection_settings": self.connection_settings,
        }
        if all(value is None for value in values.values()):
            return None
        return DriverOptions(**values)

    def connection_parameters(self) -> ConnectionParameters:
        """Build :class:`ConnectionParameters` from these settings."""
        return ConnectionParameters(
            dsn=self.dsn,
            host=self.host,
            port=self.port,
            dbname=self.dbname,
            driver_options=self.driver_options(),
        )

    @property
    def password_value(self) -> Optional[str]:
        return self.password.get_secret_value() if self.password else None


def load_config_from_file(config_path: str = DEFAULT_CONFIG_FILE) -> Dict[str, Any]:
    """Load configuration from JSON file."""
    path = Path(config_path)
    if not path.exists():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Error loading config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.error("Config file %s must contain a JSON object", path)
        return {}
    return data


def get_settings(config_path: str = DEFAULT_CONFIG_FILE, **overrides: Any) -> Settings:
    """Return settings with file values layered over the environment."""
    config_data = load_config_from_file(config_path)
    config_data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**config_data)


settings = get_settings()
