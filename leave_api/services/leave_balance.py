# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from leave_api.exceptions import NotFound
from leave_api.models.enums import LeaveType
from leave_api.models.leave_balance import LeaveBalance
from leave_api.repositories.employee import EmployeeRepository
from leave_api.repositories.leave_balance import LeaveBalanceRepository
from leave_api.schemas.leave_balance import BalanceListResponse, BalanceResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_api.schemas.auth import AuthContext
    from leave_api.schemas.leave_balance import SetBalanceRequest

logger = logging.getLogger(__name__)


def build_balance_response(balance: LeaveBalance) -> BalanceResponse:
    """Map a balance model to its response schema."""
    return BalanceResponse(
        employee_id=balance.employee_id,
        leave_type=LeaveType(balance.leave_type),
        remaining_days=balance.remaining_days,
        version=balance.version,
        updated_at=balance.updated_at,
    )


async def get_employee_balances(session: AsyncSession, employee_id: uuid.UUID) -> BalanceListResponse:
    """All stored balances for an employee, one per leave type."""
    balances = await LeaveBalanceRepository(session).list_by_employee(employee_id)
    return BalanceListResponse(items=[build_balance_response(b) for b in balances], total=len(balances))


async def set_balance(
    session: AsyncSession,
    auth: AuthContext,
    employee_id: uuid.UUID,
    leave_type: LeaveType,
    payload: SetBalanceRequest,
) -> BalanceResponse:
    """Create the balance for (employee, leave type) or overwrite its remaining days."""
    if await EmployeeRepository(session).get_by_id(employee_id) is None:
        raise NotFound("Employee not found.", code="EMPLOYEE_NOT_FOUND")

    balances = LeaveBalanceRepository(session)
    balance = await balances.get(employee_id, leave_type, for_update=True)
    if balance is None:
        balance = await balances.create(
            LeaveBalance(
                employee_id=employee_id,
                leave_type=leave_type.value,
                remaining_days=payload.remaining_days,
            )
        )
    else:
        balance.remaining_days = payload.remaining_days
        await balances.update(balance)

    await session.commit()
    await session.refresh(balance)
    logger.info(
        "Balance %s/%s set to %d day(s) by %s", employee_id, leave_type.value, payload.remaining_days, auth.user_id
    )
    return build_balance_response(balance)
