"""
Exception handlers that give every error response the same shape.

FastAPI renders errors as ``{"detail": ...}`` and request validation
failures as 422.  Clients of this service expect ``{"error": ...}``
and a 400 for an invalid recipe payload, so the handlers below replace
the defaults.  ``register_exception_handlers`` is called from
``main.create_app``.
"""

import logging
from typing import Any, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

FIELDS_REQUIRED = "All fields are required"
RECIPE_NOT_FOUND = "Recipe not found"
INVALID_QUERY = "Invalid query parameters"


def error_response(status_code: int, message: Any, headers: dict | None = None) -> JSONResponse:
    """Build a JSON error response with a stable ``error`` key."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _has_error_in(errors: Iterable[dict], location: str) -> bool:
    return any(err.get("loc", ())[:1] == (location,) for err in errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map request validation failures onto the service's error taxonomy.

    A malformed path identifier can never match a stored record, so it
    is reported as not found.  Bad query parameters get a generic 400.
    Anything else (missing, empty or non‑string body fields, or an
    unparseable body) is a 400 naming the required fields.
    """
    errors = exc.errors()
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, errors)
    if _has_error_in(errors, "path"):
        return error_response(status.HTTP_404_NOT_FOUND, RECIPE_NOT_FOUND)
    if _has_error_in(errors, "query"):
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_QUERY)
    return error_response(status.HTTP_400_BAD_REQUEST, FIELDS_REQUIRED)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
