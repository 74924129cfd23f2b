import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .errors import global_error_handler
from .logging_config import req_id_var


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # Prefer client-provided ID to enable end-to-end correlation
        req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = req_id_var.set(req_id)
        try:
            response: Response = await call_next(request)
        except Exception as exc:
            # Build the 500 envelope here, while req_id_var still holds the id
            response = await global_error_handler(request, exc)
        finally:
            req_id_var.reset(token)
        # Ensure response carries the same request id without overwriting existing value
        response.headers.setdefault("X-Request-ID", req_id)
        return response
