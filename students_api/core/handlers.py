# students_api/core/handlers.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from students_api.core import response
from students_api.core.exceptions import BaseAPIException

logger = logging.getLogger(__name__)


# 1. Errors raised on purpose by the endpoints
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return response.error_response(exc.status_code, exc.message)


# 2. Request decoding and validation errors (body, path parameters)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = response.body_decode_error(errors, exc.body)
    if message is None:
        message = response.validation_error(errors)
    logger.debug(f"Rejected {request.method} {request.url.path}: {message}")
    return response.error_response(status.HTTP_400_BAD_REQUEST, message)


# 3. Standard HTTP errors (unknown route, wrong method...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return response.error_response(exc.status_code, str(exc.detail))


# 4. Anything else
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)
    return response.error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
