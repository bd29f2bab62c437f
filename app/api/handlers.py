"""SellScope — Exception Handlers.

Renders every error in the shared envelope. Schema violations become
400 INVALID_REQUEST with the validation errors as ``details``; unknown
routes become 404 NOT_FOUND.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.responses import error_response
from app.core.errors import APIError, ErrorCode, InternalError, InvalidRequestError, NotFoundError
from app.core.logging import get_logger

logger = get_logger("api.handlers")


class _HTTPStatusError(APIError):
    """Framework-level HTTP error (e.g. 405) carried in the shared envelope."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.code = ErrorCode.INVALID_REQUEST if status_code < 500 else ErrorCode.INTERNAL_ERROR


async def api_error_handler(request: Request, exc: APIError):
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(
        InvalidRequestError(details=jsonable_encoder(exc.errors()))
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(NotFoundError(f"Route not found: {request.url.path}"))
    return error_response(_HTTPStatusError(exc.status_code, str(exc.detail)))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error: {exc}",
        exc_info=exc,
        extra={"endpoint": request.url.path},
    )
    return error_response(InternalError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
