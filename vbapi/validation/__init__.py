from vbapi.validation.validator import (
    RecordValidator,
    ValidationResult,
    Violation,
    validate_employee,
    validate_staff,
)

__all__ = [
    "RecordValidator",
    "ValidationResult",
    "Violation",
    "validate_employee",
    "validate_staff",
]
