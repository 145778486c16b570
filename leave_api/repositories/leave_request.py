# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leave_api.models.leave_request import LeaveRequest

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class LeaveRequestRepository:
    """Reads and writes leave request rows.

    ``create`` and ``update`` only flush; the calling workflow owns the commit
    so a decision and its balance debit land in one transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, request_id: uuid.UUID, *, for_update: bool = False) -> LeaveRequest | None:
        """Fetch a request by ID, optionally locking the row until commit."""
        query = select(LeaveRequest).where(col(LeaveRequest.id) == request_id)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)
        result = await self._session.execute(query)
        return result.scalar_one_or_none()

    async def list_by_employee(self, employee_id: uuid.UUID) -> list[LeaveRequest]:
        """Requests submitted by an employee, newest first."""
        result = await self._session.execute(
            select(LeaveRequest)
            .where(col(LeaveRequest.employee_id) == employee_id)
            .order_by(col(LeaveRequest.date_requested).desc())
        )
        return list(result.scalars().all())

    async def list_by_manager(self, manager_id: uuid.UUID) -> list[LeaveRequest]:
        """Requests assigned to a manager, newest first.

        Unassigned requests take the deciding manager on approval or rejection.
        """
        result = await self._session.execute(
            select(LeaveRequest)
            .where(col(LeaveRequest.manager_id) == manager_id)
            .order_by(col(LeaveRequest.date_requested).desc())
        )
        return list(result.scalars().all())

    async def create(self, leave_request: LeaveRequest) -> LeaveRequest:
        self._session.add(leave_request)
        await self._session.flush()
        return leave_request

    async def update(self, leave_request: LeaveRequest) -> LeaveRequest:
        self._session.add(leave_request)
        await self._session.flush()
        return leave_request
