from __future__ import annotations

import logging

from fastapi import APIRouter

from vbapi.api.deps import TodayDep
from vbapi.exceptions import RecordValidationError
from vbapi.schemas.employee import Employee
from vbapi.schemas.error import ErrorResponse
from vbapi.validation import validate_employee

logger = logging.getLogger(__name__)

employee_router = APIRouter(prefix="/api/employee", tags=["employee"])


@employee_router.post(
    "",
    response_model=Employee,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def post_employee(payload: Employee, today: TodayDep) -> Employee:
    """Validate an employee record and echo it back unchanged."""
    result = validate_employee(payload, today=today)
    if not result.is_valid:
        logger.info("Employee rejected: %d violation(s)", len(result.violations))
        raise RecordValidationError("Employee", result)
    return payload
