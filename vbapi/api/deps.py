from __future__ import annotations

from datetime import date, datetime
from typing import Annotated
from zoneinfo import ZoneInfo

from fastapi import Depends

from vbapi.config import get_settings


def get_today() -> date:
    """Current calendar date in the configured timezone.

    Read once per request and handed to the validator, so age rules never
    consult the clock themselves.
    """
    return datetime.now(ZoneInfo(get_settings().timezone)).date()


TodayDep = Annotated[date, Depends(get_today)]
