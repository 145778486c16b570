# ruff: noqa: TC003
from __future__ import annotations

import uuid
from datetime import date, datetime

import sqlalchemy as sa
from sqlmodel import Field

from leave_api.models.base import UUIDBase, now_utc
from leave_api.models.enums import LeaveStatus


class LeaveRequest(UUIDBase, table=True):
    """An employee's request for time off over an inclusive date range."""

    __tablename__ = "leave_request"
    __table_args__ = (sa.Index("ix_leave_request_employee_status", "employee_id", "status"),)

    employee_id: uuid.UUID = Field(
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("employee.id"), nullable=False, index=True),
    )
    manager_id: uuid.UUID | None = Field(
        default=None,
        sa_column=sa.Column(sa.Uuid, sa.ForeignKey("employee.id"), nullable=True, index=True),
    )
    leave_type: str = Field(max_length=50)
    start_date: date
    end_date: date
    reason: str | None = None
    status: str = Field(
        default=LeaveStatus.PENDING, max_length=50, index=True, sa_column_kwargs={"server_default": "Pending"}
    )
    date_requested: datetime = Field(
        default_factory=now_utc,
        sa_type=sa.DateTime(timezone=True),  # ty: ignore[invalid-argument-type]
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    date_actioned: datetime | None = Field(default=None, sa_type=sa.DateTime(timezone=True))  # ty: ignore[invalid-argument-type]

    def day_span(self) -> int:
        """Number of calendar days covered, counting both the start and end day."""
        return (self.end_date - self.start_date).days + 1

    def is_valid_request(self, today: date) -> bool:
        """True when the leave does not start in the past and does not end before it starts."""
        return self.start_date >= today and self.end_date >= self.start_date
