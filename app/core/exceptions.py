"""
Application errors and their HTTP mapping
"""
import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors surfaced to API clients"""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "bad_request"

    def __init__(
        self,
        message: str,
        errors: Optional[Dict[str, str]] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors or {}
        if error_code:
            self.error_code = error_code


class InvalidIdentifierError(AppError):
    """An identifier that must be numeric was not"""
    error_code = "invalid_identifier"

    def __init__(self, field: str, value):
        super().__init__(
            f"{field} must be a positive integer, got {value!r}",
            errors={field: "must be a positive integer"},
        )
        self.field = field
        self.value = value


class InvalidParamsError(AppError):
    error_code = "invalid_params"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    error_code = "forbidden"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    error_code = "conflict"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code < 500:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "code": exc.status_code,
            "message": exc.message,
            "data": {"errorCode": exc.error_code, "errors": exc.errors},
        },
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "message": "Something went wrong. Please try again later.",
            "data": None,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
