"""Error taxonomy shared by stores, services and routes.

``RecordNotFound`` and ``ValidationFailed`` are recovered into 404 and 422
responses. ``StoreError`` and any SQLAlchemy failure become an opaque 500; the
detail only goes to the log.
"""

import logging
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "the server encountered a problem and could not process your request"


class StockupError(Exception):
    """Base class for domain errors."""


class RecordNotFound(StockupError):
    def __init__(self, resource: str = "Record"):
        self.resource = resource
        super().__init__(f"{resource} not found")


class EditConflict(StockupError):
    """Reserved for optimistic-concurrency checks; nothing raises it yet."""

    def __init__(self, resource: str = "Record"):
        self.resource = resource
        super().__init__(f"unable to update {resource} due to an edit conflict, please try again")


class ValidationFailed(StockupError):
    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("Validation failed")


class StoreError(StockupError):
    """Any backing-store failure that is not a missing record."""


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) or str(loc[-1])


def _validation_response(errors: Dict[str, str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": "Validation failed", "errors": errors},
    )


async def record_not_found_handler(request: Request, exc: RecordNotFound) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    return _validation_response(exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error.get("loc", ("body",))), error.get("msg", "is invalid"))
    return _validation_response(errors)


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request failed: %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": SERVER_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordNotFound, record_not_found_handler)
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
