# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel

from leave_api.models.enums import NotificationType


class NotificationResponse(BaseModel):
    id: uuid.UUID
    employee_id: uuid.UUID
    manager_id: uuid.UUID | None
    type: NotificationType
    message: str
    date_sent: datetime


class NotificationListResponse(BaseModel):
    items: list[NotificationResponse]
    total: int
