"""Global exception handlers for the API.

Request validation failures are reported as 400 with field-level details.
Anything that escapes a router is logged and reported as a bare 500; the
client never sees internal details.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from osc_backend.api.models import ErrorResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed requests as 400 instead of FastAPI's 422."""
        errors = _summarize_errors(exc.errors())
        logger.warning(
            "Validation error: %s",
            errors,
            extra={"path": request.url.path, "method": request.method},
        )
        body = ErrorResponse(detail="Invalid request", errors=errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump()
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for errors no router mapped to a response."""
        logger.error(
            "Unhandled error: %s",
            type(exc).__name__,
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        body = ErrorResponse(detail="Internal server error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(exclude={"errors"}),
        )


def _summarize_errors(errors: Any) -> list[dict[str, Any]]:
    """Keep the JSON-safe part of Pydantic's error list."""
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]
