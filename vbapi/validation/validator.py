from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, computed_field

from vbapi.validation.rules import EMPLOYEE_RULES, STAFF_RULES, FieldRule, RuleContext

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from vbapi.schemas.employee import Employee
    from vbapi.schemas.staff import Staff


class Violation(BaseModel):
    """A single failed rule."""

    field: str
    message: str


class ValidationResult(BaseModel):
    """Outcome of running a rule set against one record."""

    violations: list[Violation] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def errors(self) -> list[str]:
        """Violation messages in rule order."""
        return [v.message for v in self.violations]


class RecordValidator:
    """Evaluates every rule of a constraint set against a record.

    Validation never raises for bad input; callers branch on
    ``ValidationResult.is_valid``. The evaluation date is passed in so the
    result depends only on the arguments.
    """

    def __init__(self, rules: Sequence[FieldRule]) -> None:
        self.rules = tuple(rules)

    def validate(self, record: BaseModel, *, today: date) -> ValidationResult:
        ctx = RuleContext(record=record, today=today)
        violations = []
        for rule in self.rules:
            message = rule.evaluate(ctx)
            if message is not None:
                violations.append(Violation(field=rule.field, message=message))
        return ValidationResult(violations=violations)


employee_validator = RecordValidator(EMPLOYEE_RULES)
staff_validator = RecordValidator(STAFF_RULES)


def validate_employee(record: Employee, *, today: date) -> ValidationResult:
    return employee_validator.validate(record, today=today)


def validate_staff(record: Staff, *, today: date) -> ValidationResult:
    return staff_validator.validate(record, today=today)
