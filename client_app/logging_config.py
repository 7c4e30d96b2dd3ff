"""Structured logging helpers for the Mazzura client."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import time
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterator

CORRELATION_ID = contextvars.ContextVar("correlation_id", default=None)
_DEFAULT_EXCLUDE_KEYS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
}
_DEFAULT_REDACT_KEYS = {
    "email",
    "owner_email",
    "session_email",
    "name",
    "location",
    "image_url",
    "body_type",
    "skin_tone",
}
_EMAIL_PATTERN = re.compile(r"[\w.\-+]+@[\w.\-]+")


class JsonFormatter(logging.Formatter):
    """Emit structured JSON logs with correlation metadata."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        record_message = super().format(record)
        correlation_id = getattr(record, "correlation_id", None) or CORRELATION_ID.get()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record_message,
            "event": getattr(record, "event", record_message),
            "correlation_id": correlation_id,
        }

        for key, value in record.__dict__.items():
            if key in _DEFAULT_EXCLUDE_KEYS or key in payload:
                continue
            payload[key] = redact_for_log(value)
        return json.dumps(payload)


def configure_logging(level: int | str | None = None) -> None:
    """Configure root logging with JSON output."""

    desired_level = level or os.getenv("LOG_LEVEL", "INFO")
    logging.root.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=desired_level, handlers=[handler])


def _redact_string(value: str) -> str:
    """Mask email-like or URL strings to avoid leaking PII into logs."""

    if _EMAIL_PATTERN.search(value):
        return _EMAIL_PATTERN.sub("[redacted-email]", value)
    if value.lower().startswith("http"):
        return "[redacted-url]"
    return value


def redact_for_log(payload: Any) -> Any:
    """Recursively scrub profile details and emails from log payloads."""

    if payload is None:
        return None
    if isinstance(payload, str):
        return _redact_string(payload)
    if isinstance(payload, (int, float, bool)):
        return payload
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(item) for item in payload]
    if isinstance(payload, dict):
        scrubbed: Dict[str, Any] = {}
        for key, value in payload.items():
            if key in _DEFAULT_REDACT_KEYS:
                scrubbed[key] = "[redacted]"
            else:
                scrubbed[key] = redact_for_log(value)
        return scrubbed
    return str(payload)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger ensuring configuration is applied."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Return an existing correlation id or assign a new one."""

    current = CORRELATION_ID.get()
    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    if current:
        return current
    new_id = uuid.uuid4().hex
    CORRELATION_ID.set(new_id)
    return new_id


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Context manager to temporarily set a correlation id."""

    token = CORRELATION_ID.set(correlation_id or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit a structured log entry with correlation metadata."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    safe_fields = redact_for_log(fields)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **safe_fields},
    )


@dataclass
class Operation:
    """Outcome of one user action, filled in by the caller inside the block."""

    correlation_id: str
    failed: bool = False
    error_type: str | None = None
    status_code: int | None = None

    def fail(self, exc: BaseException) -> None:
        self.failed = True
        self.error_type = type(exc).__name__
        self.status_code = getattr(exc, "status_code", None)


@contextlib.contextmanager
def operation_context(logger: logging.Logger, name: str, **attributes: Any) -> Iterator[Operation]:
    """Scope a correlation id around one user action and log its outcome.

    Exactly one of ``<name>_completed`` or ``<name>_failed`` is logged. Callers
    that handle an error themselves mark it with :meth:`Operation.fail`;
    exceptions escaping the block are logged and re-raised.
    """

    start = time.perf_counter()
    with correlation_context() as correlation_id:
        operation = Operation(correlation_id=correlation_id)
        log_event(logger, logging.INFO, f"{name}_started", correlation_id=correlation_id, **attributes)
        try:
            yield operation
        except Exception:
            log_event(
                logger,
                logging.WARNING,
                f"{name}_failed",
                correlation_id=correlation_id,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                exc_info=True,
            )
            raise
        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        if operation.failed:
            log_event(
                logger,
                logging.WARNING,
                f"{name}_failed",
                correlation_id=correlation_id,
                duration_ms=duration_ms,
                error_type=operation.error_type,
                status_code=operation.status_code,
            )
            return
        log_event(
            logger,
            logging.INFO,
            f"{name}_completed",
            correlation_id=correlation_id,
            duration_ms=duration_ms,
        )


__all__ = [
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "Operation",
    "redact_for_log",
    "operation_context",
]
