import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import CORS_HEADERS
from schemas.password_validation import (
    INTERNAL_ERROR_MESSAGE,
    MISSING_PASSWORD_MESSAGE,
    PasswordValidationResponse,
)

logger = logging.getLogger(__name__)

PASSWORD_VALIDATION_PATH = "/validar-senha"


def _missing_password_response() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=PasswordValidationResponse.failure(MISSING_PASSWORD_MESSAGE).to_wire(),
    )


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    """Malformed body or missing/invalid 'senha' field"""
    # Locations and error types only, the rejected input may be a password
    problems = [(error.get("loc"), error.get("type")) for error in exc.errors()]
    logger.warning("Rejected malformed request on %s: %s", request.url.path, problems)
    return _missing_password_response()


async def body_parsing_exception_handler(
    request: Request, exc: StarletteHTTPException
):
    """
    FastAPI raises a plain 400 HTTPException when the body cannot be decoded
    at all (e.g. invalid UTF-8). On the validation route that is still a
    request-shape error; everything else keeps the framework's default body.
    """
    if exc.status_code == 400 and request.url.path == PASSWORD_VALIDATION_PATH:
        logger.warning(
            "Rejected undecodable request body on %s: %s",
            request.url.path,
            exc.detail,
        )
        return _missing_password_response()

    return await http_exception_handler(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Last resort for anything the routes did not handle. The caller only sees
    a generic message; details go to the log.

    Starlette runs this handler outside of the middleware stack, so CORS
    headers have to be attached here.
    """
    logger.error(
        "Unhandled exception while processing %s %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=PasswordValidationResponse.failure(INTERNAL_ERROR_MESSAGE).to_wire(),
        headers=CORS_HEADERS,
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )
    app.add_exception_handler(StarletteHTTPException, body_parsing_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
