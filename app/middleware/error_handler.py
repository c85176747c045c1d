"""Error handling middleware."""

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.core.cors import cors_headers
from app.core.exceptions import AppException
from app.core.messages import get_message

logger = structlog.get_logger()


def _error_response(status_code: int, message: str) -> JSONResponse:
    """Build the `{"error": ...}` body shared by every failure branch."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=cors_headers(),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle custom application exceptions.

    Args:
        request: Request object
        exc: Application exception

    Returns:
        JSON error response
    """
    return _error_response(exc.status_code, exc.message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """
    Handle HTTP exceptions.

    Args:
        request: Request object
        exc: HTTP exception

    Returns:
        JSON error response
    """
    return _error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handle malformed request bodies.

    Args:
        request: Request object
        exc: Validation exception

    Returns:
        JSON error response with 400 status
    """
    logger.info("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        get_message("invalid_request", get_settings().locale),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    This runs outside the middleware stack, so CORS headers are set here.

    Args:
        request: Request object
        exc: Exception

    Returns:
        JSON error response
    """
    settings = get_settings()
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    message = get_message("login_failed", settings.locale)
    if settings.debug:
        message += f": {type(exc).__name__}"
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
