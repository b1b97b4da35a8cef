from __future__ import annotations

import logging

from fastapi import APIRouter

from vbapi.api.deps import TodayDep
from vbapi.exceptions import RecordValidationError
from vbapi.schemas.error import ErrorResponse
from vbapi.schemas.staff import Staff
from vbapi.validation import validate_staff

logger = logging.getLogger(__name__)

staff_router = APIRouter(prefix="/api/staff", tags=["staff"])


@staff_router.post(
    "",
    response_model=Staff,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def post_staff(payload: Staff, today: TodayDep) -> Staff:
    """Validate a staff record and echo it back unchanged."""
    result = validate_staff(payload, today=today)
    if not result.is_valid:
        logger.info("Staff rejected: %d violation(s)", len(result.violations))
        raise RecordValidationError("Staff", result)
    return payload
