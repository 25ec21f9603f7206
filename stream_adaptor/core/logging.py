import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

from stream_adaptor.core.config import get_settings

# Context variable for request tracking
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


# Attributes passed through `extra=` by serializers and HTTP hooks
SERIALIZATION_FIELDS = ("serializer", "status_code", "content_type", "request_url")


class StructuredLogFormatter(logging.Formatter):
    """
    Formats records as one JSON object per line.

    Serializer context supplied through `extra=` (see SERIALIZATION_FIELDS)
    is lifted to top-level keys so failures can be filtered by status code
    or content type.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        corr_id = getattr(record, "correlation_id", None) or correlation_id.get()
        if corr_id:
            entry["correlation_id"] = corr_id

        entry.update(
            (field, getattr(record, field))
            for field in SERIALIZATION_FIELDS
            if getattr(record, field, None) is not None
        )

        if record.exc_info and record.exc_info[1] is not None:
            error = record.exc_info[1]
            entry["exception"] = {
                "type": type(error).__name__,
                "message": str(error),
                "code": getattr(error, "code", None),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, default=str)


class CorrelationIdFilter(logging.Filter):
    """Injects the current correlation ID into every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id.get()
        return True


def configure_logging() -> None:
    """
    Configure package logging.

    Sets up structured JSON logging or formatted console logging,
    based on library settings.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    package_logger = logging.getLogger("stream_adaptor")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    package_logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())

    if settings.ENABLE_STRUCTURED_LOGGING:
        formatter = StructuredLogFormatter()
    else:
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] [%(correlation_id)s] - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    handler.setFormatter(formatter)
    package_logger.addHandler(handler)

    # HTTP client chatter is rarely useful next to ours
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger whose records carry the current correlation ID.

    Args:
        name: Logger name, typically the module name

    Returns:
        logging.Logger: Logger with a CorrelationIdFilter attached once
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())
    return logger


def set_correlation_id(corr_id: Optional[str] = None) -> str:
    """
    Set the correlation ID for the current context.

    Args:
        corr_id: Correlation ID to set. If None, a new UUID is generated.

    Returns:
        str: The correlation ID that was set
    """
    corr_id = corr_id or str(uuid.uuid4())
    correlation_id.set(corr_id)
    return corr_id
