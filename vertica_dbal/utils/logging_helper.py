"""Logging utilities with correlation IDs and connection counters."""

import logging
import uuid
from contextvars import ContextVar
from typing import Optional

from prometheus_client import Counter, start_http_server

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    """Inject the correlation ID into all log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = correlation_id_var.get() or "-"
        return True


operation_counts = {"success": 0, "failure": 0}

# Prometheus counters mirroring ``operation_counts``
success_counter = Counter(
    "vertica_connect_success_total",
    "Total successful Vertica connection attempts",
)
failure_counter = Counter(
    "vertica_connect_failure_total",
    "Total failed Vertica connection attempts",
)


def record_success() -> None:
    operation_counts["success"] += 1
    success_counter.inc()


def record_failure() -> None:
    operation_counts["failure"] += 1
    failure_counter.inc()


def setup_logging(level: int = logging.INFO, metrics_port: Optional[int] = None) -> str:
    """Configure root logging and generate a correlation ID.

    Returns the generated correlation ID so callers can include it elsewhere if
    needed.  When ``metrics_port`` is given a Prometheus endpoint is started.
    """
    cid = uuid.uuid4().hex
    correlation_id_var.set(cid)

    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(correlation_id)s] %(levelname)s %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Add the filter to each handler
    for handler in root.handlers:
        if not any(isinstance(f, CorrelationIdFilter) for f in handler.filters):
            handler.addFilter(CorrelationIdFilter())

    if metrics_port:
        try:
            start_http_server(int(metrics_port))
            logging.getLogger(__name__).info("Prometheus metrics server running on port %s", metrics_port)
        except OSError as exc:  # pragma: no cover - environment may block
            logging.getLogger(__name__).error("Failed to start metrics server: %s", exc)

    return cid
