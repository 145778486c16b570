# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from leave_api.models.enums import LeaveType


class SetBalanceRequest(BaseModel):
    """Request body for creating or overwriting a balance."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    remaining_days: int = Field(ge=0, le=366)


class BalanceResponse(BaseModel):
    """Balance for a single leave type."""

    employee_id: uuid.UUID
    leave_type: LeaveType
    remaining_days: int
    version: int
    updated_at: datetime | None


class BalanceListResponse(BaseModel):
    """All leave balances for an employee."""

    items: list[BalanceResponse]
    total: int
