# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlmodel import col

from leave_api.models.notification import Notification

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class NotificationRepository:
    """Stores notification records. Delivery happens elsewhere, if at all."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, notification: Notification) -> Notification:
        self._session.add(notification)
        await self._session.flush()
        return notification

    async def list_by_employee(self, employee_id: uuid.UUID) -> list[Notification]:
        """Notifications involving an employee, as requester or as manager, newest first."""
        result = await self._session.execute(
            select(Notification)
            .where(
                (col(Notification.employee_id) == employee_id) | (col(Notification.manager_id) == employee_id)
            )
            .order_by(col(Notification.date_sent).desc())
        )
        return list(result.scalars().all())
