"""Command line helper that prints or checks the configured Vertica DSN."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config.settings import DEFAULT_CONFIG_FILE, get_settings
from .db.dsn import build_dsn
from .db.health import check_configured_connection
from .utils.logging_helper import operation_counts, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build the Vertica ODBC connection string")
    parser.add_argument(
        "--config-file",
        default=DEFAULT_CONFIG_FILE,
        help="Path to JSON configuration file. Environment variables fill any missing values.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Open and close a connection instead of printing the DSN.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``vertica-dsn``."""
    args = parse_args(argv)
    settings = get_settings(args.config_file)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, settings.metrics_port)

    if not args.check:
        print(build_dsn(settings.connection_parameters()))
        return 0

    ok = check_configured_connection(settings)
    logger.info(
        "Connection check %s - successes: %s failures: %s",
        "passed" if ok else "failed",
        operation_counts["success"],
        operation_counts["failure"],
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
