# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel

from leave_api.schemas.leave_balance import BalanceResponse
from leave_api.schemas.leave_request import LeaveRequestResponse


class DashboardResponse(BaseModel):
    """Read-only view of an employee's leave history and balances, built per request."""

    employee_id: uuid.UUID
    leave_history: list[LeaveRequestResponse]
    leave_balances: list[BalanceResponse]
    pending_count: int
    generated_at: datetime
