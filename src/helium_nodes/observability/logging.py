"""Structured JSON logging with node execution context."""
import logging
import sys
from typing import Any

from pythonjsonlogger import jsonlogger

from helium_nodes.config import get_settings

CONTEXT_FIELDS = ("node_type", "resource", "operation", "item_index")


class NodeContextFilter(logging.Filter):
    """Add node context to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add default node context fields if not present."""
        for field in CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, None)
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with standardized field names."""

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        """Add custom fields to the log record."""
        super().add_fields(log_record, record, message_dict)

        if not log_record.get("timestamp"):
            log_record["timestamp"] = self.formatTime(record, self.datefmt)

        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value
            else:
                log_record.pop(field, None)


class NodeLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges per-call extra into the adapter's extra."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**(self.extra or {}), **(kwargs.get("extra") or {})}
        return msg, kwargs


def setup_logging() -> None:
    """Configure logging for the node pack (JSON unless disabled)."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)

    if settings.log_json:
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)

    handler.addFilter(NodeContextFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level.upper())

    # Reduce noise from third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def get_logger(name: str) -> NodeLoggerAdapter:
    """
    Get a logger with node context support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        LoggerAdapter that can accept node context in extra dict
    """
    logger = logging.getLogger(name)
    return NodeLoggerAdapter(logger, extra={})


def with_node_context(
    node_type: str | None = None,
    resource: str | None = None,
    operation: str | None = None,
    item_index: int | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """
    Create an extra dict with node context for logging.

    Args:
        node_type: Node type identifier
        resource: Selected resource
        operation: Selected operation
        item_index: Index of the item being processed
        **kwargs: Additional context fields

    Returns:
        Dict to pass as extra parameter to logger methods
    """
    extra = kwargs.copy()
    if node_type:
        extra["node_type"] = node_type
    if resource:
        extra["resource"] = resource
    if operation:
        extra["operation"] = operation
    if item_index is not None:
        extra["item_index"] = item_index
    return extra
