"""Logging and tracing for s3-vfs.

Log lines are rendered as JSON on stderr so command output on stdout stays
machine-readable. Fields bound with :func:`operation_context` are merged into
every line logged while a filesystem operation runs, so backend modules do not
have to repeat the bucket or operation name themselves.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from .config import settings

SPAN_PREFIX = "s3_vfs"

_tracer = trace.get_tracer(__name__)


def setup_tracing(enabled: bool, service_name: str) -> None:
    """Export spans to the console when ``enabled``; otherwise spans are no-ops."""
    if not enabled:
        return

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


@contextmanager
def operation_context(operation: str, bucket: str, **fields: Any) -> Iterator[trace.Span]:
    """Run one filesystem operation under a span with its log context bound.

    ``bucket``, ``operation`` and any extra ``fields`` are attached to every
    log line emitted inside the block and removed again on exit, including
    when the block raises.

    Example:
        >>> with operation_context("delete", "family-documents", prefix="old/"):
        ...     logger.info("Deleted")  # carries bucket, operation and prefix
    """
    with structlog.contextvars.bound_contextvars(
        bucket=bucket, operation=operation, **fields
    ):
        with _tracer.start_as_current_span(f"{SPAN_PREFIX}.{operation}") as span:
            span.set_attribute("s3.bucket", bucket)
            for name, value in fields.items():
                span.set_attribute(f"{SPAN_PREFIX}.{name}", str(value))
            yield span


setup_logging(settings.log_level)
setup_tracing(settings.otel_enabled, settings.otel_service_name)
