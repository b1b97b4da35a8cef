from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from vbapi.api.deps import get_today
from vbapi.main import app

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

# Fixed evaluation date so age boundaries are deterministic. 2024 is a leap year.
TODAY = date(2024, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
async def async_client(today: date) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with the evaluation date pinned."""
    app.dependency_overrides[get_today] = lambda: today
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
