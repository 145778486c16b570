# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field

from leave_api.models.base import UUIDBase, now_utc


class Notification(UUIDBase, table=True):
    """Record of a leave event addressed to an employee or manager. Never delivered here."""

    __tablename__ = "notification"

    employee_id: uuid.UUID = Field(
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("employee.id"), nullable=False, index=True),
    )
    manager_id: uuid.UUID | None = Field(
        default=None,
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("employee.id"), nullable=True, index=True),
    )
    type: str = Field(max_length=50)
    message: str = Field(max_length=1000)
    date_sent: datetime = Field(
        default_factory=now_utc,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
        sa_column_kwargs={"server_default": sa.func.now()},
    )
