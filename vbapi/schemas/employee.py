# ruff: noqa: TC003
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Employee(BaseModel):
    """Employee record as posted to ``/api/employee``.

    Only the transport shape is declared here. Business constraints are in
    ``vbapi.validation.rules.EMPLOYEE_RULES``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    name: str
    date_of_birth: date
    email: str | None = None
    # Optional on the wire so a missing phone is reported as a rule violation.
    phone: str | None = None
    hourly_salary: float
