"""Shared exception-to-HTTP mapping for service and request errors."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from delfis_api.core.validation import format_errors
from delfis_api.services.errors import (
    ConflictError,
    EntityNotFoundError,
    FieldValidationError,
    InvalidArgumentError,
    ServiceError,
)

logger = logging.getLogger(__name__)


def service_error_to_http(exc: ServiceError) -> tuple[int, object]:
    """Map a service exception to (status_code, body) for the HTTP response.

    Field validation failures answer with the field -> message map itself;
    every other error answers with ``{"detail": message}``.
    """
    if isinstance(exc, FieldValidationError):
        return status.HTTP_400_BAD_REQUEST, exc.errors
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND, {"detail": exc.message}
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT, {"detail": exc.message}
    if isinstance(exc, InvalidArgumentError):
        return status.HTTP_400_BAD_REQUEST, {"detail": exc.message}
    return status.HTTP_500_INTERNAL_SERVER_ERROR, {"detail": "Erro interno do servidor."}


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code, body = service_error_to_http(exc)
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(status_code=status_code, content=body)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_errors(exc)
    logger.info(f"{request.method} {request.url.path} -> 400: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
