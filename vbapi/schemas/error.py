from __future__ import annotations

from pydantic import BaseModel


class FieldError(BaseModel):
    """One (field, message) pair in an error response."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: str | None = None
    status_code: int
    errors: list[FieldError] = []
