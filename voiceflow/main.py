"""FastAPI application entrypoint.

``create_app`` wires the voice routers, request-id middleware and the
standard error envelope together. ``app`` is a module-level instance for
uvicorn and tests.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from .api.health import router as health_router
from .api.voice import router as voice_router
from .errors import (
    TranscriptTooLongError,
    global_error_handler,
    http_exception_handler,
    transcript_too_long_handler,
    validation_exception_handler,
)
from .middleware import RequestIDMiddleware

logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Voice", "description": "Parse voice command transcripts into intents."},
    {"name": "Health", "description": "Liveness."},
]


def create_app() -> FastAPI:
    """Assemble the FastAPI application with routers, middleware and error handlers."""
    app = FastAPI(
        title="VoiceFlow",
        version=os.getenv("APP_VERSION", "0.1.0"),
        openapi_tags=TAGS_METADATA,
    )
    app.include_router(health_router)
    app.include_router(voice_router)

    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(TranscriptTooLongError, transcript_too_long_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_error_handler)

    logger.info("application composition complete")
    return app


app = create_app()
