# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from leave_api.models.enums import NotificationType
from leave_api.repositories.notification import NotificationRepository
from leave_api.schemas.notification import NotificationListResponse, NotificationResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


async def list_notifications(session: AsyncSession, employee_id: uuid.UUID) -> NotificationListResponse:
    """Notification records involving an employee, newest first."""
    notifications = await NotificationRepository(session).list_by_employee(employee_id)
    items = [
        NotificationResponse(
            id=n.id,
            employee_id=n.employee_id,
            manager_id=n.manager_id,
            type=NotificationType(n.type),
            message=n.message,
            date_sent=n.date_sent,
        )
        for n in notifications
    ]
    return NotificationListResponse(items=items, total=len(items))
