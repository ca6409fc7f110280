"""Custom error handlers and exceptions for the application."""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from typing import Union

from .logging_config import get_logger

logger = get_logger("error_handlers")

# Request parts FastAPI prefixes to error locations
_LOCATION_PREFIXES = {"body", "path", "query", "header"}


class AppException(Exception):
    """Base exception for application-specific errors."""

    def __init__(self, message: str, status_code: int = 500, details: dict = None, headers: dict = None):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.headers = headers
        super().__init__(self.message)


class InvalidInputError(AppException):
    """Raised when input fails validation outside of a request schema."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=message,
            status_code=400,
            details={"validation_errors": [{"field": field, "message": message, "type": "value_error"}]}
        )


class ResourceNotFoundError(AppException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Union[int, str]):
        super().__init__(
            message=f"{resource} not found",
            status_code=404,
            details={"resource": resource, "identifier": str(identifier)}
        )


class ConflictError(AppException):
    """Raised when a uniqueness invariant would be violated."""

    def __init__(self, resource: str, field: str):
        super().__init__(
            message=f"{resource} with this {field} already exists",
            status_code=409,
            details={"resource": resource, "field": field}
        )


class InvalidCredentialsError(AppException):
    """Raised on a failed login. Deliberately says nothing about which part was wrong."""

    def __init__(self):
        super().__init__(message="Invalid email or password", status_code=401)


class NotAuthenticatedError(AppException):
    """Raised when a protected operation is called without a valid session."""

    def __init__(self, reason: str = "Not authenticated"):
        super().__init__(
            message=reason,
            status_code=401,
            headers={"WWW-Authenticate": "Bearer"}
        )


async def app_exception_handler(request: Request, exc: AppException):
    """Handler for custom application exceptions."""
    logger.info(
        f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}",
        extra={"status_code": exc.status_code, "details": exc.details}
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.message,
            "details": exc.details,
            "path": request.url.path
        },
        headers=exc.headers
    )


def _field_name(loc) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return " -> ".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler for request validation errors. Reports every failing field."""
    errors = []
    for error in exc.errors():
        errors.append({
            "field": _field_name(error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })

    logger.warning(
        f"Validation error on {request.method} {request.url.path}",
        extra={"validation_errors": errors}
    )

    first = errors[0] if errors else {"field": "", "message": "Validation failed"}
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": f"{first['field']}: {first['message']}" if first["field"] else first["message"],
            "validation_errors": errors,
            "path": request.url.path
        }
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handler for database errors that escaped a repository."""
    if isinstance(exc, IntegrityError):
        error_msg = "Data integrity constraint violated"
        status_code = status.HTTP_409_CONFLICT
    else:
        error_msg = "Internal server error"
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.error(
        f"Database error: {str(exc)}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=True
    )

    return JSONResponse(
        status_code=status_code,
        content={
            "error": error_msg,
            "path": request.url.path
        }
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Handler for unexpected exceptions."""
    logger.critical(
        f"Unhandled exception: {str(exc)}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=True
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "path": request.url.path
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
