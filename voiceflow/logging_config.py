import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

# Exposed so other modules can set/request ids
req_id_var: ContextVar[str] = ContextVar("req_id", default="-")

# Lightweight in-process error ring buffer
_ERRORS: list[dict[str, Any]] = []
_MAX_ERRORS = 200


def _utc_stamp() -> str:
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": _utc_stamp(),
            "req_id": getattr(record, "req_id", req_id_var.get()),
            "level": record.levelname,
            "component": record.name,
            "msg": record.getMessage(),
        }
        env = os.getenv("ENV", "").strip()
        if env:
            payload["env"] = env
        version = os.getenv("APP_VERSION") or os.getenv("GIT_TAG") or ""
        if version:
            payload["version"] = version
        if hasattr(record, "meta"):
            payload["meta"] = record.meta
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        try:
            return json.dumps(payload, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            # Fallback to plain message if payload has unserialisable types
            return str(payload.get("msg", ""))


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Propagate request id from context‑var into every log line
        record.req_id = req_id_var.get()
        return True


class _ErrorBufferHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno < logging.ERROR:
            return
        _ERRORS.append(
            {
                "timestamp": _utc_stamp(),
                "level": record.levelname,
                "component": record.name,
                "msg": record.getMessage(),
            }
        )
        if len(_ERRORS) > _MAX_ERRORS:
            # keep newest
            del _ERRORS[: len(_ERRORS) - _MAX_ERRORS]


def _truthy(name: str) -> bool:
    return os.getenv(name, "").lower() in {"1", "true", "yes", "on"}


def configure_logging() -> None:
    """
    Call once at app startup.
    LOG_LEVEL env var controls verbosity (default INFO).
    LOG_TO_STDOUT / DEBUG_MODE switch from JSON-on-stderr to plain stdout.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    force_stdout = _truthy("LOG_TO_STDOUT")
    debug_mode = _truthy("DEBUG_MODE")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    json_formatter = JsonFormatter()
    request_id_filter = RequestIdFilter()

    if force_stdout or debug_mode:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - [%(req_id)s] %(message)s")
        )
        console_handler.addFilter(request_id_filter)
        root_logger.addHandler(console_handler)
    else:
        # Production: JSON logging to stderr
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(json_formatter)
        stderr_handler.addFilter(request_id_filter)
        root_logger.addHandler(stderr_handler)

    error_handler = _ErrorBufferHandler()
    error_handler.addFilter(request_id_filter)
    root_logger.addHandler(error_handler)

    # Reduce third-party verbosity unless LOG_LEVEL is DEBUG
    if level != "DEBUG":
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: level=%s, stdout=%s, debug_mode=%s", level, force_stdout, debug_mode
    )


def get_errors() -> list[dict[str, Any]]:
    """Return recent errors."""
    return _ERRORS.copy()


def get_last_errors(n: int) -> list[dict[str, Any]]:
    """Return the last *n* buffered errors."""
    if n <= 0:
        return []
    return _ERRORS[-n:]


def clear_errors() -> None:
    """Clear the error buffer."""
    _ERRORS.clear()
