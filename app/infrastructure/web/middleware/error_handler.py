"""
Global error handling for the FastAPI application.
Catches and formats all exceptions consistently as {"message": ...} bodies.
"""

import logging

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.domain.models.base import (
    AuthenticationError,
    DomainException,
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something broke!"


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return self.handle_exception(request, exc)

    def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """Log the full traceback and answer with a generic 500."""
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
            exc_info=exc,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE}
        )


class BusinessException(Exception):
    """
    Base exception for errors raised directly by the web layer.
    """
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UnauthorizedException(BusinessException):
    """Exception raised for authentication errors."""
    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(message=message, status_code=status.HTTP_401_UNAUTHORIZED)


# Domain exception type -> HTTP status. First match wins.
DOMAIN_STATUS_CODES = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateEntityError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_CONTENT),
)


def status_for_domain_exception(exc: DomainException) -> int:
    for exc_type, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def business_exception_handler(request: Request, exc: BusinessException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_for_domain_exception(exc)
    if status_code == status.HTTP_401_UNAUTHORIZED:
        # Never echo token failure details to the caller
        message = "Unauthorized access: Invalid token"
    else:
        message = exc.message
    return JSONResponse(status_code=status_code, content={"message": message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={
            "message": "Invalid request",
            "errors": jsonable_encoder(exc.errors()),
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an application."""
    app.add_exception_handler(BusinessException, business_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
