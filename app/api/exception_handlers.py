"""
Global exception handlers.

Maps the application error taxonomy to HTTP responses. Only the user-safe
message of an error ever reaches the client; internal detail is logged.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import AuthError, InternalError, SessionAppError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register handlers for application errors, request validation errors,
    and anything unexpected.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(SessionAppError)
    async def app_error_handler(request: Request, exc: SessionAppError) -> JSONResponse:
        """Return the error's own status code and safe message."""
        if isinstance(exc, InternalError):
            logger.error(f"Internal error at {request.url.path}: {exc}")
        elif isinstance(exc, AuthError):
            logger.info(f"Auth rejected at {request.url.path}: {exc}")
        else:
            logger.debug(f"{type(exc).__name__} at {request.url.path}: {exc}")

        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.user_message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies are client errors, reported as 400."""
        errors = exc.errors()
        logger.warning(f"Request validation failed at {request.url.path}: {errors}")
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = first.get("msg", "Invalid request")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": f"{field}: {message}" if field else message},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Last resort: log with traceback, answer with a generic 500."""
        logger.exception(f"Unhandled error at {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )
