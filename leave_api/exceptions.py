import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    code: str | None = None
    detail: str | None = None
    status_code: int


class AppError(Exception):
    """Base application exception.

    ``code`` is a stable machine-readable reason so callers never have to
    match on ``message``.
    """

    default_status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code: str | None = None

    def __init__(self, message: str, status_code: int | None = None, *, code: str | None = None) -> None:
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status_code
        self.code = code if code is not None else self.default_code
        super().__init__(self.message)


class Unauthorized(AppError):
    """The caller's identity is missing or does not resolve to an employee."""

    default_status_code = status.HTTP_401_UNAUTHORIZED
    default_code = "MISSING_IDENTITY"


class Forbidden(AppError):
    """The caller is known but lacks the role or ownership required."""

    default_status_code = status.HTTP_403_FORBIDDEN
    default_code = "ROLE_REQUIRED"


class NotFound(AppError):
    default_status_code = status.HTTP_404_NOT_FOUND


class Conflict(AppError):
    default_status_code = status.HTTP_409_CONFLICT


class ValidationError(AppError):
    """A business rule rejected the request (past dates, insufficient balance...)."""

    default_status_code = status.HTTP_400_BAD_REQUEST


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.info("%s %s rejected: %s (%s)", request.method, request.url.path, exc.code, exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=type(exc).__name__,
            code=exc.code,
            detail=exc.message,
            status_code=exc.status_code,
        ).model_dump(),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="RequestValidationError",
            code="INVALID_PAYLOAD",
            detail=str(exc.errors()),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        ).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
