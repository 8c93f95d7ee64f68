"""
Logging utilities for the prompt refiner.

All loggers live under the ``promptrefiner`` namespace. Records emitted
while a refinement request is in progress carry that request's id, so
lines from the gate, the extractors and the engine can be correlated
even when several requests run side by side.
"""

import json
import logging
import sys
import time
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "promptrefiner"
PACKAGE_NAME = __name__.split(".")[0]
NO_REQUEST = "-"

_request_context: ContextVar[Dict[str, Any]] = ContextVar("request_context", default={})
_configured = False


class RequestContextFilter(logging.Filter):
    """Stamp ``request_id`` (and any other bound fields) onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = _request_context.get()
        record.request_id = context.get("request_id", NO_REQUEST)
        for key, value in context.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


def current_context() -> Dict[str, Any]:
    """Fields bound by the innermost active LogContext."""
    return dict(_request_context.get())


def _make_handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(RequestContextFilter())
    return handler


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[Path | str] = None,
    console: bool = True,
) -> None:
    """
    Configure the ``promptrefiner`` logger tree.

    Safe to call again (the CLI does so once the config file is known);
    existing handlers are replaced.

    Args:
        level: Log level name; unknown names fall back to INFO
        format_string: Record format, may use ``%(request_id)s``
        log_file: Optional path to a log file
        console: Log to stderr, keeping stdout free for refined JSON
    """
    global _configured

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if console:
        root_logger.addHandler(_make_handler(logging.StreamHandler(sys.stderr), numeric_level, formatter))

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        root_logger.addHandler(_make_handler(file_handler, numeric_level, formatter))

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, re-rooted under ``promptrefiner``.

    ``prompt_refiner.refiner.engine`` becomes ``promptrefiner.refiner.engine``.
    """
    if not _configured:
        setup_logging(level="WARNING")

    if name.startswith(f"{PACKAGE_NAME}."):
        name = name[len(PACKAGE_NAME) + 1:]
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LogContext:
    """
    Time an operation and bind its fields to every record logged inside it.

    Example:
        with LogContext(logger, "Refining prompt", request_id="3f2a9c1b7e04"):
            gate.check(text)   # gate's log lines carry request_id=3f2a9c1b7e04
    """

    def __init__(self, logger: logging.Logger, operation: str, **context):
        self.logger = logger
        self.operation = operation
        self.context = context
        self.elapsed: Optional[float] = None
        self._started: Optional[float] = None
        self._token = None

    def __enter__(self):
        self._token = _request_context.set({**_request_context.get(), **self.context})
        self._started = time.perf_counter()
        fields = ", ".join(f"{k}={v}" for k, v in self.context.items())
        self.logger.info(f"Starting: {self.operation} ({fields})")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._started
        try:
            if exc_type is None:
                self.logger.info(f"Completed: {self.operation} ({self.elapsed:.3f}s)")
            else:
                self.logger.warning(
                    f"Failed: {self.operation} ({self.elapsed:.3f}s) - {exc_type.__name__}: {exc_val}"
                )
        finally:
            _request_context.reset(self._token)
        return False


def log_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """Log an exception with its traceback at ERROR level."""
    logger.error(f"{message}: {type(exc).__name__}: {exc}", exc_info=exc)


def log_json(logger: logging.Logger, message: str, data: dict, level: int = logging.DEBUG) -> None:
    """
    Log a document as indented JSON.

    Serialization is skipped entirely when ``level`` is disabled.
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, f"{message}:\n{json.dumps(data, indent=2, default=str)}")
