from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vbapi.schemas.error import ErrorResponse, FieldError

if TYPE_CHECKING:
    from vbapi.validation import ValidationResult

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def field_errors(self) -> list[FieldError]:
        return []


class RecordValidationError(AppError):
    """A well-formed record failed one or more business rules."""

    def __init__(self, record_type: str, result: ValidationResult) -> None:
        self.record_type = record_type
        self.result = result
        super().__init__(
            f"{record_type} record failed validation",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    def field_errors(self) -> list[FieldError]:
        return [FieldError(field=v.field, message=v.message) for v in self.result.violations]


def _location_to_field(loc: tuple[int | str, ...]) -> str:
    # Drop the leading "body" segment FastAPI adds to request-body errors.
    parts = list(loc)
    if parts and parts[0] == "body":
        parts = parts[1:]
    # JSON decode errors carry only a character offset, not a field name.
    if not any(isinstance(part, str) for part in parts):
        return "body"
    return ".".join(str(part) for part in parts)


async def _app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=type(exc).__name__,
            detail=exc.message,
            status_code=exc.status_code,
            errors=exc.field_errors(),
        ).model_dump(),
    )


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        FieldError(field=_location_to_field(tuple(err.get("loc", ()))), message=err.get("msg", "Invalid value"))
        for err in exc.errors()
    ]
    logger.info("Malformed request body on %s: %d error(s)", request.url.path, len(errors))
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error="ValidationError",
            detail="Request body could not be parsed",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            errors=errors,
        ).model_dump(),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppError, _app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
