"""Declarative constraint sets for inbound person records.

Each record type gets one ordered tuple of ``FieldRule`` objects. A field rule
runs its checks in order and stops at the first failure, so a field reports at
most one message. Every field rule is always evaluated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from dateutil.relativedelta import relativedelta
from email_validator import EmailNotValidError, validate_email

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic import BaseModel

    Check = Callable[[Any, "RuleContext"], str | None]
    SalaryFloor = Callable[["RuleContext"], float]

PHONE_PATTERN = re.compile(r"((\(\d{3}\) ?)|(\d{3}-))?\d{3}-\d{4}")

MAX_AGE_YEARS = 65
SENIOR_AGE_YEARS = 30
JUNIOR_MIN_HOURLY_SALARY = 50
SENIOR_MIN_HOURLY_SALARY = 200

INVALID_NAME = "Invalid Name"
NAME_LENGTH = "Name must be between {min} and {max} characters. You entered {length} characters."
INVALID_BIRTHDATE = "Birthdate is not valid."
INVALID_EMAIL = "Email address is not valid."
INVALID_PHONE = "Phone is not valid."
PHONE_TOO_SHORT = "PhoneNumber must not be less than {min} characters."
PHONE_TOO_LONG = "PhoneNumber must not exceed {max} characters."
PHONE_PATTERN_MISMATCH = "PhoneNumber not valid"
SALARY_OUT_OF_RANGE = "Hourly salary does not fall within allowed range."


@dataclass(frozen=True)
class RuleContext:
    """Everything a check may look at besides the field value itself."""

    record: BaseModel
    today: date


@dataclass(frozen=True)
class FieldRule:
    """An ordered chain of checks bound to one record field."""

    field: str
    attribute: str
    checks: tuple[Check, ...]

    def evaluate(self, ctx: RuleContext) -> str | None:
        value = getattr(ctx.record, self.attribute, None)
        for check in self.checks:
            message = check(value, ctx)
            if message is not None:
                return message
        return None


# ---------------------------------------------------------------------------
# Date helpers
# ---------------------------------------------------------------------------


def years_before(today: date, years: int) -> date:
    """Calendar subtraction; Feb 29 falls back to Feb 28 in non-leap years."""
    return today - relativedelta(years=years)


def is_senior(date_of_birth: date, today: date) -> bool:
    """True once the subject has turned 30, including on the birthday itself."""
    return date_of_birth <= years_before(today, SENIOR_AGE_YEARS)


def minimum_hourly_salary(date_of_birth: date, today: date) -> float:
    """Age-dependent wage floor for employees."""
    if is_senior(date_of_birth, today):
        return SENIOR_MIN_HOURLY_SALARY
    return JUNIOR_MIN_HOURLY_SALARY


def matches_phone_pattern(value: str) -> bool:
    return PHONE_PATTERN.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Check factories
# ---------------------------------------------------------------------------


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def not_empty(message: str) -> Check:
    def check(value: Any, ctx: RuleContext) -> str | None:
        return message if _is_blank(value) else None

    return check


def length_between(min_length: int, max_length: int, message: str) -> Check:
    def check(value: Any, ctx: RuleContext) -> str | None:
        length = len(value)
        if min_length <= length <= max_length:
            return None
        return message.format(min=min_length, max=max_length, length=length)

    return check


def min_length(limit: int, message: str) -> Check:
    def check(value: Any, ctx: RuleContext) -> str | None:
        return message.format(min=limit) if len(value) < limit else None

    return check


def max_length(limit: int, message: str) -> Check:
    def check(value: Any, ctx: RuleContext) -> str | None:
        return message.format(max=limit) if len(value) > limit else None

    return check


def matches(pattern: re.Pattern[str], message: str) -> Check:
    def check(value: Any, ctx: RuleContext) -> str | None:
        return None if pattern.fullmatch(value) else message

    return check


def email_address(message: str) -> Check:
    """Syntax-only email check. Absent or blank values pass."""

    def check(value: Any, ctx: RuleContext) -> str | None:
        if _is_blank(value):
            return None
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return message
        return None

    return check


def max_age(years: int, message: str) -> Check:
    def check(value: Any, ctx: RuleContext) -> str | None:
        if value is None or value < years_before(ctx.today, years):
            return message
        return None

    return check


def salary_within(
    low: float,
    high: float,
    message: str,
    floor: SalaryFloor | None = None,
) -> Check:
    """Inclusive range check; ``floor`` may raise the lower bound per record."""

    def check(value: Any, ctx: RuleContext) -> str | None:
        if value is None:
            return message
        lower = max(low, floor(ctx)) if floor is not None else low
        amount = Decimal(str(value))
        if not amount.is_finite():
            return message
        if Decimal(str(lower)) <= amount <= Decimal(str(high)):
            return None
        return message

    return check


def _employee_salary_floor(ctx: RuleContext) -> float:
    date_of_birth = getattr(ctx.record, "date_of_birth", None)
    if date_of_birth is None:
        return JUNIOR_MIN_HOURLY_SALARY
    return minimum_hourly_salary(date_of_birth, ctx.today)


# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------

NAME_RULE = FieldRule(
    field="name",
    attribute="name",
    checks=(
        not_empty(INVALID_NAME),
        length_between(10, 250, NAME_LENGTH),
    ),
)

EMAIL_RULE = FieldRule(
    field="email",
    attribute="email",
    checks=(email_address(INVALID_EMAIL),),
)

PHONE_RULE = FieldRule(
    field="phone",
    attribute="phone",
    checks=(
        not_empty(INVALID_PHONE),
        min_length(10, PHONE_TOO_SHORT),
        max_length(20, PHONE_TOO_LONG),
        matches(PHONE_PATTERN, PHONE_PATTERN_MISMATCH),
    ),
)

EMPLOYEE_RULES: tuple[FieldRule, ...] = (
    NAME_RULE,
    FieldRule(
        field="dateOfBirth",
        attribute="date_of_birth",
        checks=(max_age(MAX_AGE_YEARS, INVALID_BIRTHDATE),),
    ),
    EMAIL_RULE,
    PHONE_RULE,
    FieldRule(
        field="hourlySalary",
        attribute="hourly_salary",
        checks=(salary_within(50, 400, SALARY_OUT_OF_RANGE, floor=_employee_salary_floor),),
    ),
)

STAFF_RULES: tuple[FieldRule, ...] = (
    NAME_RULE,
    EMAIL_RULE,
    PHONE_RULE,
    FieldRule(
        field="hourlySalary",
        attribute="hourly_salary",
        checks=(salary_within(30, 400, SALARY_OUT_OF_RANGE),),
    ),
)
