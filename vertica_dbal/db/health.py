"""Simple database connectivity checks."""

from __future__ import annotations

import logging
from typing import Optional

from .. import config
from ..config.settings import Settings
from ..utils.logging_helper import record_failure, record_success
from .connections import ConnectionOpener, PyodbcConnectionOpener
from .dsn import build_dsn

logger = logging.getLogger(__name__)


def check_connection(
    dsn: str,
    username: Optional[str] = None,
    password: Optional[str] = None,
    opener: Optional[ConnectionOpener] = None,
) -> bool:
    """Return ``True`` if a connection can be established using ``dsn``."""
    opener = opener if opener is not None else PyodbcConnectionOpener()
    try:
        conn = opener.open(dsn, username, password)
        conn.close()
    except Exception as exc:
        record_failure()
        logger.error("Database connection failed: %s", exc)
        return False
    record_success()
    return True


def check_configured_connection(
    settings: Optional[Settings] = None, opener: Optional[ConnectionOpener] = None
) -> bool:
    """Check connectivity to the configured Vertica database."""
    settings = settings or config.settings
    if opener is None:
        opener = PyodbcConnectionOpener(timeout=settings.connection_timeout)
    dsn = build_dsn(settings.connection_parameters())
    return check_connection(dsn, settings.user, settings.password_value, opener=opener)
