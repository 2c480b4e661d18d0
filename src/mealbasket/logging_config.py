"""Structured logging for the mealbasket service.

Two pieces of context follow a log call around: the HTTP request id and the
batch id (a meal plan being turned into a shopping list). Both live in
context variables so the engine modules never pass them explicitly.
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
batch_id_ctx: ContextVar[str | None] = ContextVar("batch_id", default=None)

_CONTEXT_VARS: dict[str, ContextVar[str | None]] = {
    "request_id": request_id_ctx,
    "batch_id": batch_id_ctx,
}

# Short labels for the text format; request ids are cut to 8 characters.
_TEXT_LABELS: dict[str, tuple[str, int | None]] = {
    "request_id": ("req", 8),
    "batch_id": ("batch", None),
}

# Third-party loggers that are too chatty at INFO.
QUIET_LOGGERS: dict[str, int] = {
    "httpx": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.access": logging.WARNING,
}


def current_context() -> dict[str, str]:
    """Return the logging context variables that are currently set."""
    return {name: value for name, var in _CONTEXT_VARS.items() if (value := var.get())}


class StructuredJsonFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "service": "mealbasket",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **current_context(),
        }

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            entry.update(extra_data)

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry["location"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }
        return json.dumps(entry, default=str)


class ContextualFormatter(logging.Formatter):
    """Single-line text format for local development."""

    def format(self, record: logging.LogRecord) -> str:
        labels = []
        for name, value in current_context().items():
            label, width = _TEXT_LABELS[name]
            labels.append(f"{label}={value[:width] if width else value}")
        context = f" [{', '.join(labels)}]" if labels else ""

        line = " | ".join(
            (
                datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S"),
                record.levelname.ljust(8),
                f"{record.name}{context}",
                record.getMessage(),
            )
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that copies the current context into ``extra``."""

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        kwargs["extra"] = {**kwargs.get("extra", {}), **current_context()}
        return msg, kwargs


def get_logger(name: str) -> ContextLogger:
    """Get a context-aware logger for the given module name."""
    return ContextLogger(logging.getLogger(name), {})


def _use_json(json_format: bool | None) -> bool:
    if json_format is not None:
        return json_format
    if os.getenv("LOG_FORMAT", "").lower() == "json":
        return True
    return not sys.stdout.isatty() and os.getenv("ENVIRONMENT", "development") == "production"


def _handler(handler: logging.Handler, formatter: logging.Formatter, level: int) -> logging.Handler:
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def configure_logging(
    log_level: str = "INFO",
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    Install the mealbasket handlers on the root logger.

    Args:
        log_level: Minimum level name; ``LOG_LEVEL`` in the environment wins.
        json_format: Force JSON (True) or text (False). When None, JSON is used
            if ``LOG_FORMAT=json`` or when running non-interactively in production.
        log_file: Also write to this file when given.
    """
    level_name = os.getenv("LOG_LEVEL", log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    use_json = _use_json(json_format)
    formatter: logging.Formatter = StructuredJsonFormatter() if use_json else ContextualFormatter()

    root = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    root.addHandler(_handler(logging.StreamHandler(sys.stdout), formatter, level))
    if log_file:
        root.addHandler(_handler(logging.FileHandler(log_file), formatter, level))

    logging.getLogger("mealbasket").setLevel(level)
    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

    get_logger(__name__).info(
        f"Logging configured: level={level_name}, format={'json' if use_json else 'text'}"
    )


def set_context(request_id: str | None = None, batch_id: str | None = None) -> None:
    """Set logging context variables for the current task."""
    for name, value in (("request_id", request_id), ("batch_id", batch_id)):
        if value is not None:
            _CONTEXT_VARS[name].set(value)


def clear_context() -> None:
    """Unset every logging context variable."""
    for var in _CONTEXT_VARS.values():
        var.set(None)


class LoggingContext:
    """
    Bind request or batch ids for the duration of a ``with`` block.

    Values are restored on exit, so contexts nest:

        with LoggingContext(batch_id=plan_id):
            ...
    """

    def __init__(self, request_id: str | None = None, batch_id: str | None = None):
        self._values = {"request_id": request_id, "batch_id": batch_id}
        self._tokens: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContext":
        for name, value in self._values.items():
            if value is not None:
                self._tokens[name] = _CONTEXT_VARS[name].set(value)
        return self

    def __exit__(self, *args: Any) -> None:
        for name, token in self._tokens.items():
            _CONTEXT_VARS[name].reset(token)
        self._tokens.clear()
