"""
Error handling middleware.
Centralizes error handling and response formatting for proxied requests.
"""
import json
import logging
import traceback
from typing import Callable, Optional

from fastapi import Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from aura_backend.services.arcade import (
    GatewayError,
    ResponseSchemaError,
    UpstreamStatusError,
)

logger = logging.getLogger(__name__)


async def _get_request_body(request: Request) -> Optional[dict]:
    """
    Request body cached by the request logging middleware, if any.
    """
    try:
        body_bytes = getattr(request.state, "body", None)
        if not body_bytes:
            return None

        return json.loads(body_bytes.decode("utf-8"))
    except Exception:
        return None


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed request bodies (including unknown analysisType) with 400."""
    logger.warning(
        "Validation error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "errors": exc.errors(),
        },
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request",
            "details": jsonable_encoder(exc.errors()),
        },
    )


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    def __init__(self, app, is_production: bool = False):
        super().__init__(app)
        self.is_production = is_production

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
            return response

        except GatewayError as e:
            extra = {
                "path": request.url.path,
                "method": request.method,
                "error": str(e),
                "error_type": type(e).__name__,
            }
            if isinstance(e, UpstreamStatusError):
                extra["upstream_status"] = e.status_code
                extra["upstream_body"] = e.body
            elif isinstance(e, ResponseSchemaError):
                extra["schema_errors"] = e.errors

            logger.error("Upstream error", extra=extra, exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": str(e)},
            )

        except Exception as e:
            body = await _get_request_body(request)
            tb_str = traceback.format_exc()

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "request_body": body,
                    "traceback": tb_str,
                },
                exc_info=True,
            )

            # Don't expose internal errors in production
            if self.is_production:
                message = "An internal error occurred. Please try again later."
            else:
                message = f"{type(e).__name__}: {str(e)}"

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": message},
            )
