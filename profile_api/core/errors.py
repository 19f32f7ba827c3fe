# profile_api/core/errors.py
"""
Domain exceptions and the FastAPI handlers that map them to responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import (
    http_exception_handler as default_http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from profile_api.core.logging import get_logger

logger = get_logger(__name__)


class ProfileError(Exception):
    """Client input that cannot be turned into a profile (HTTP 400)."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: str = "birth_date") -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class ParseError(ProfileError):
    """Birth date text is not a valid YYYY-MM-DD calendar date."""


class AgeOutOfRangeError(ProfileError):
    """Birth date yields an age outside 0..255."""


async def profile_error_handler(request: Request, exc: ProfileError) -> JSONResponse:
    logger.warning(
        "birth_date_rejected",
        path=request.url.path,
        error=exc.__class__.__name__,
        detail=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("validation_error", path=request.url.path, errors=exc.errors())
    return await request_validation_exception_handler(request, exc)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        "http_exception",
        path=request.url.path,
        status_code=exc.status_code,
        detail=exc.detail,
    )
    return await default_http_exception_handler(request, exc)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unexpected_exception", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProfileError, profile_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
