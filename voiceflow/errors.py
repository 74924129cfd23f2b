"""Application-level errors and standardized error handlers."""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .logging_config import req_id_var

logger = logging.getLogger(__name__)

_STATUS_TO_CODE = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    413: "payload_too_large",
    422: "validation_error",
    500: "internal_error",
}


class TranscriptTooLongError(ValueError):
    """Raised by the HTTP layer when a transcript exceeds the configured limit."""

    def __init__(self, length: int, limit: int):
        super().__init__(f"transcript has {length} characters; limit is {limit}")
        self.length = length
        self.limit = limit


def json_error(code: str, message: str, status: int, meta: dict[str, Any] | None = None) -> JSONResponse:
    """Create a standardized JSON error response.

    Shape: {"code", "message", "meta"}; codes are lower-case.
    """
    return JSONResponse(
        {"code": code.lower(), "message": message, "meta": meta or {}},
        status_code=status,
    )


def _base_meta() -> dict[str, Any]:
    return {"request_id": req_id_var.get(), "timestamp": datetime.now(UTC).isoformat()}


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    code = _STATUS_TO_CODE.get(exc.status_code, "http_error")
    return json_error(code, str(exc.detail), exc.status_code, meta=_base_meta())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    meta = _base_meta()
    meta["errors"] = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()
    ]
    return json_error("validation_error", "Invalid input data", 422, meta=meta)


async def transcript_too_long_handler(request: Request, exc: TranscriptTooLongError) -> JSONResponse:
    meta = _base_meta()
    meta.update({"length": exc.length, "limit": exc.limit})
    return json_error("payload_too_large", str(exc), 413, meta=meta)


async def global_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log with traceback, answer with the error envelope."""
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return json_error("internal_error", "Internal server error", 500, meta=_base_meta())
