"""
Error taxonomy and the handlers that render it.

Every failure leaves the API as {"error": <message>, "code": <code>}.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "internal_error"
    message = "Internal server error"

    def __init__(self, message=None, headers=None):
        super().__init__(
            status_code=self.status_code,
            detail=message or self.message,
            headers=headers,
        )


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    message = "Invalid request"


class Conflict(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "conflict"
    message = "User already exists with this email"


class InvalidCredentials(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_credentials"
    message = "Invalid email or password"


class PayloadTooLarge(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "payload_too_large"
    message = "Request body too large"


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthenticated"
    message = "Access token required"

    def __init__(self, message=None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    message = "Admin privileges required"


class InvalidToken(Forbidden):
    code = "invalid_token"
    message = "Invalid token"


class ExpiredToken(Forbidden):
    code = "expired_token"
    message = "Token has expired"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    message = "Not found"


class StoreTimeout(ApiError):
    code = "store_timeout"
    message = "Database operation timed out"


class Internal(ApiError):
    pass


_DEFAULT_CODES = {
    400: ValidationError.code,
    401: Unauthenticated.code,
    403: Forbidden.code,
    404: NotFound.code,
}


def error_body(message: str, code: str) -> dict:
    return {"error": message, "code": code}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    code = getattr(exc, "code", None) or _DEFAULT_CODES.get(exc.status_code, "http_error")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), code),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=error_body("; ".join(problems) or ValidationError.message, ValidationError.code),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=Internal.status_code,
        content=error_body(Internal.message, Internal.code),
    )


def install_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
