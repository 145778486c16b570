"""Tests for reading and setting leave balances."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from httpx import AsyncClient

BALANCE_URL = "/api/LeaveBalance"


def _headers(employee_id: str) -> dict[str, str]:
    return {"X-User-Id": employee_id}


async def _register(client: AsyncClient, email: str) -> str:
    resp = await client.post(
        "/api/Employee/register",
        json={"email": email, "full_name": "Test", "password": "long-enough-pw"},
    )
    assert resp.status_code == 201, resp.text
    result: str = resp.json()["id"]
    return result


@pytest.fixture
async def employee_id(async_client: AsyncClient) -> str:
    return await _register(async_client, "emp@example.com")


async def test_no_balances_initially(async_client: AsyncClient, employee_id: str) -> None:
    resp = await async_client.get(BALANCE_URL, headers=_headers(employee_id))
    assert resp.status_code == 200
    assert resp.json() == {"items": [], "total": 0}


async def test_set_balance_creates_then_overwrites(
    async_client: AsyncClient,
    employee_id: str,
    manager_id: str,
) -> None:
    url = f"{BALANCE_URL}/{employee_id}/Annual"

    created = await async_client.put(url, json={"remainingDays": 20}, headers=_headers(manager_id))
    assert created.status_code == 200
    assert created.json()["remaining_days"] == 20
    assert created.json()["version"] == 1

    updated = await async_client.put(url, json={"remaining_days": 12}, headers=_headers(manager_id))
    assert updated.status_code == 200
    assert updated.json()["remaining_days"] == 12
    assert updated.json()["version"] == 2

    resp = await async_client.get(BALANCE_URL, headers=_headers(employee_id))
    data = resp.json()
    assert data["total"] == 1
    assert data["items"][0]["leave_type"] == "Annual"
    assert data["items"][0]["remaining_days"] == 12


async def test_balances_are_per_leave_type(
    async_client: AsyncClient,
    employee_id: str,
    manager_id: str,
) -> None:
    for leave_type, days in [("Sick", 5), ("Annual", 15)]:
        resp = await async_client.put(
            f"{BALANCE_URL}/{employee_id}/{leave_type}",
            json={"remainingDays": days},
            headers=_headers(manager_id),
        )
        assert resp.status_code == 200

    resp = await async_client.get(BALANCE_URL, headers=_headers(employee_id))
    assert {i["leave_type"]: i["remaining_days"] for i in resp.json()["items"]} == {"Annual": 15, "Sick": 5}


async def test_balances_are_private_to_the_caller(
    async_client: AsyncClient,
    employee_id: str,
    manager_id: str,
) -> None:
    await async_client.put(
        f"{BALANCE_URL}/{employee_id}/Annual", json={"remainingDays": 3}, headers=_headers(manager_id)
    )
    resp = await async_client.get(BALANCE_URL, headers=_headers(manager_id))
    assert resp.json()["total"] == 0


async def test_negative_balance_rejected(
    async_client: AsyncClient,
    employee_id: str,
    manager_id: str,
) -> None:
    resp = await async_client.put(
        f"{BALANCE_URL}/{employee_id}/Annual", json={"remainingDays": -1}, headers=_headers(manager_id)
    )
    assert resp.status_code == 422


async def test_set_balance_unknown_employee(async_client: AsyncClient, manager_id: str) -> None:
    resp = await async_client.put(
        f"{BALANCE_URL}/{uuid.uuid4()}/Annual", json={"remainingDays": 1}, headers=_headers(manager_id)
    )
    assert resp.status_code == 404
    assert resp.json()["code"] == "EMPLOYEE_NOT_FOUND"


async def test_set_balance_unknown_leave_type(
    async_client: AsyncClient,
    employee_id: str,
    manager_id: str,
) -> None:
    resp = await async_client.put(
        f"{BALANCE_URL}/{employee_id}/Sabbatical", json={"remainingDays": 1}, headers=_headers(manager_id)
    )
    assert resp.status_code == 422


async def test_set_balance_requires_manager(async_client: AsyncClient, employee_id: str) -> None:
    resp = await async_client.put(
        f"{BALANCE_URL}/{employee_id}/Annual", json={"remainingDays": 99}, headers=_headers(employee_id)
    )
    assert resp.status_code == 403
    resp = await async_client.get(BALANCE_URL, headers=_headers(employee_id))
    assert resp.json()["total"] == 0
