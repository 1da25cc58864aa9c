"""Exception handlers that turn failures into JSON error bodies."""

import logging

import httpx
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mealmate.domain.errors import BadRequestError, NotFoundError, PaymentGatewayError

_logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the application's exception handlers."""
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(BadRequestError, _bad_request)
    app.add_exception_handler(NotFoundError, _not_found)
    app.add_exception_handler(PyMongoError, _store_error)
    app.add_exception_handler(httpx.HTTPError, _gateway_error)
    app.add_exception_handler(PaymentGatewayError, _gateway_error)
    app.add_exception_handler(Exception, _unexpected_error)


def _error(status_code: int, message: str, **extra: object) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def _validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request",
        details=jsonable_encoder(exc.errors()),
    )


async def _bad_request(request: Request, exc: BadRequestError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def _store_error(request: Request, exc: PyMongoError) -> JSONResponse:
    _logger.error(
        "Database operation failed: %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database operation failed")


async def _gateway_error(request: Request, exc: Exception) -> JSONResponse:
    _logger.error(
        "Payment gateway request failed: %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Payment gateway request failed"
    )


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    _logger.error(
        "Unhandled error: %s %s", request.method, request.url.path, exc_info=exc
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
