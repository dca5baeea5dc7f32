"""API error types and their JSON envelopes."""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_REQUEST_MESSAGE = "Invalid request"


class APIError(Exception):
    """Base error carrying the public message and HTTP status.

    The message is the only text that reaches the client; the underlying
    cause is logged server-side.
    """

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None, **extra: Any):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_body(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class StoreError(APIError):
    """The article store rejected a query or insert."""


class GenerationStoreError(StoreError):
    """The store failed while loading the articles selected for generation."""

    def to_body(self) -> dict[str, Any]:
        return {"success": False, **super().to_body()}


class SelectionError(APIError):
    """The generation request is not acceptable (empty, unknown ids, no target)."""

    status_code = 400

    def to_body(self) -> dict[str, Any]:
        return {"success": False, **super().to_body()}


class WebhookError(APIError):
    """The downstream newsletter webhook failed or could not be reached."""

    status_code = 502

    def to_body(self) -> dict[str, Any]:
        return {"success": False, **super().to_body()}


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": INVALID_REQUEST_MESSAGE,
            "detail": jsonable_encoder(exc.errors()),
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    """Map API errors to their JSON envelopes."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
