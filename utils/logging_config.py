"""
Structured logging for the name search service.

JSON log lines carry:
- timestamp (ISO 8601, UTC)
- level and logger name
- message
- Extra context when present (request_id, latency_ms, stage, code, ...)
"""
import asyncio
import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Any, Dict

# Attributes copied from LogRecord into the JSON payload when set via extra={...}
EXTRA_FIELDS = ("request_id", "method", "path", "status_code", "latency_ms", "stage", "code")


class JSONFormatter(logging.Formatter):
    """Formats each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure root logging once at startup.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        json_format: JSON lines when True, plain text otherwise
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
    root_logger.addHandler(handler)

    # Request logging is done by RequestIDMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def log_execution_time(func):
    """
    Log how long the wrapped function took, in milliseconds.

    Works for plain and async functions:

        @log_execution_time
        def build_index():
            ...
    """
    logger = logging.getLogger(func.__module__)

    def _report(start_time: float) -> None:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{func.__name__} completed in {elapsed_ms:.2f}ms",
            extra={"latency_ms": round(elapsed_ms, 2)}
        )

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _report(start_time)

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            _report(start_time)

    if asyncio.iscoroutinefunction(func):
        return async_wrapper
    return sync_wrapper
