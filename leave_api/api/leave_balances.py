# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter

from leave_api.api.deps import AuthDep, ManagerDep
from leave_api.db import SessionDep
from leave_api.models.enums import LeaveType
from leave_api.schemas.leave_balance import BalanceListResponse, BalanceResponse, SetBalanceRequest
from leave_api.services import leave_balance as balance_service

leave_balances_router = APIRouter(prefix="/api/LeaveBalance", tags=["balances"])


@leave_balances_router.get("", response_model=BalanceListResponse)
async def get_my_balances(session: SessionDep, auth: AuthDep) -> BalanceListResponse:
    """Get the caller's balances for every leave type that has one."""
    return await balance_service.get_employee_balances(session, auth.user_id)


@leave_balances_router.put("/{employee_id}/{leave_type}", response_model=BalanceResponse)
async def set_employee_balance(
    employee_id: uuid.UUID,
    leave_type: LeaveType,
    payload: SetBalanceRequest,
    session: SessionDep,
    auth: ManagerDep,
) -> BalanceResponse:
    """Create or overwrite an employee's balance (manager only)."""
    return await balance_service.set_balance(session, auth, employee_id, leave_type, payload)
