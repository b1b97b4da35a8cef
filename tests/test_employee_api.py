"""Integration tests for POST /api/employee."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from httpx import AsyncClient

EMPLOYEE_URL = "/api/employee"


def _employee_payload(
    name: str = "Jane Doe Smith",
    date_of_birth: str = "1989-06-15",
    email: str | None = "jane@acme.io",
    phone: str | None = "123-456-7890",
    hourly_salary: float = 250,
) -> dict:
    payload: dict = {
        "name": name,
        "dateOfBirth": date_of_birth,
        "hourlySalary": hourly_salary,
    }
    if email is not None:
        payload["email"] = email
    if phone is not None:
        payload["phone"] = phone
    return payload


# ---------------------------------------------------------------------------
# Accepted records
# ---------------------------------------------------------------------------


async def test_valid_employee_is_echoed(async_client: AsyncClient) -> None:
    payload = _employee_payload()
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 200
    assert resp.json() == payload


async def test_omitted_email_is_not_added(async_client: AsyncClient) -> None:
    payload = _employee_payload(email=None)
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 200
    assert "email" not in resp.json()


async def test_junior_employee_low_wage_accepted(async_client: AsyncClient) -> None:
    # One day short of thirty on the pinned date (2024-06-15).
    payload = _employee_payload(date_of_birth="1994-06-16", hourly_salary=60)
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 200


# ---------------------------------------------------------------------------
# Rule violations
# ---------------------------------------------------------------------------


async def test_senior_below_floor_rejected(async_client: AsyncClient) -> None:
    payload = _employee_payload(date_of_birth="1989-06-15", email="jane@x.com", hourly_salary=180)
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "RecordValidationError"
    assert data["status_code"] == 400
    assert data["errors"] == [
        {"field": "hourlySalary", "message": "Hourly salary does not fall within allowed range."},
    ]


async def test_thirtieth_birthday_today_is_senior(async_client: AsyncClient) -> None:
    payload = _employee_payload(date_of_birth="1994-06-15", hourly_salary=180)
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 400


async def test_too_old_rejected(async_client: AsyncClient) -> None:
    payload = _employee_payload(date_of_birth="1959-06-14")
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 400
    assert resp.json()["errors"] == [{"field": "dateOfBirth", "message": "Birthdate is not valid."}]


async def test_exactly_sixty_five_accepted(async_client: AsyncClient) -> None:
    payload = _employee_payload(date_of_birth="1959-06-15")
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 200


async def test_missing_phone_is_a_rule_violation(async_client: AsyncClient) -> None:
    resp = await async_client.post(EMPLOYEE_URL, json=_employee_payload(phone=None))
    assert resp.status_code == 400
    assert resp.json()["errors"] == [{"field": "phone", "message": "Phone is not valid."}]


async def test_every_violation_listed(async_client: AsyncClient) -> None:
    payload = _employee_payload(
        name="Jane",
        date_of_birth="1940-01-01",
        email="nope",
        phone="abcdefghij",
        hourly_salary=500,
    )
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 400
    fields = [e["field"] for e in resp.json()["errors"]]
    assert fields == ["name", "dateOfBirth", "email", "phone", "hourlySalary"]


# ---------------------------------------------------------------------------
# Malformed bodies
# ---------------------------------------------------------------------------


async def test_missing_date_of_birth_is_malformed(async_client: AsyncClient) -> None:
    payload = _employee_payload()
    del payload["dateOfBirth"]
    resp = await async_client.post(EMPLOYEE_URL, json=payload)
    assert resp.status_code == 422
    data = resp.json()
    assert data["error"] == "ValidationError"
    assert [e["field"] for e in data["errors"]] == ["dateOfBirth"]


async def test_non_numeric_salary_is_malformed(async_client: AsyncClient) -> None:
    resp = await async_client.post(EMPLOYEE_URL, json=_employee_payload() | {"hourlySalary": "lots"})
    assert resp.status_code == 422
    assert [e["field"] for e in resp.json()["errors"]] == ["hourlySalary"]


async def test_invalid_json_is_malformed(async_client: AsyncClient) -> None:
    resp = await async_client.post(
        EMPLOYEE_URL,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 422
    assert resp.json()["errors"][0]["field"] == "body"
    assert len(resp.json()["errors"]) == 1


async def test_nan_salary_is_malformed(async_client: AsyncClient) -> None:
    body = b'{"name":"Jane Doe Smith","dateOfBirth":"1989-06-15","phone":"123-456-7890","hourlySalary":NaN}'
    resp = await async_client.post(EMPLOYEE_URL, content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 422
    assert [e["field"] for e in resp.json()["errors"]] == ["hourlySalary"]


async def test_infinite_salary_is_malformed(async_client: AsyncClient) -> None:
    body = b'{"name":"Jane Doe Smith","dateOfBirth":"1989-06-15","phone":"123-456-7890","hourlySalary":Infinity}'
    resp = await async_client.post(EMPLOYEE_URL, content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 422
    assert [e["field"] for e in resp.json()["errors"]] == ["hourlySalary"]
