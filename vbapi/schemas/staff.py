from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Pydantic renders Decimal as a JSON string by default; keep it numeric.
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Staff(BaseModel):
    """Staff record as posted to ``/api/staff``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: str | None = None
    phone: str | None = None
    hourly_salary: JsonDecimal
