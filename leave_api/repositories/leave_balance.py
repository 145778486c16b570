# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leave_api.models.leave_balance import LeaveBalance

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_api.models.enums import LeaveType


class LeaveBalanceRepository:
    """Reads and writes per-employee, per-leave-type balances."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(
        self,
        employee_id: uuid.UUID,
        leave_type: LeaveType,
        *,
        for_update: bool = False,
    ) -> LeaveBalance | None:
        """Fetch the balance for one leave type, optionally with a FOR UPDATE lock."""
        query = select(LeaveBalance).where(
            col(LeaveBalance.employee_id) == employee_id,
            col(LeaveBalance.leave_type) == leave_type.value,
        )
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)
        result = await self._session.execute(query)
        return result.scalar_one_or_none()

    async def list_by_employee(self, employee_id: uuid.UUID) -> list[LeaveBalance]:
        result = await self._session.execute(
            select(LeaveBalance)
            .where(col(LeaveBalance.employee_id) == employee_id)
            .order_by(col(LeaveBalance.leave_type))
        )
        return list(result.scalars().all())

    async def create(self, balance: LeaveBalance) -> LeaveBalance:
        self._session.add(balance)
        await self._session.flush()
        return balance

    async def update(self, balance: LeaveBalance) -> LeaveBalance:
        """Flush a modified balance and bump its version."""
        balance.version += 1
        self._session.add(balance)
        await self._session.flush()
        return balance
