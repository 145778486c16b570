from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from leave_api.models.enums import LeaveStatus
from leave_api.repositories.leave_balance import LeaveBalanceRepository
from leave_api.repositories.leave_request import LeaveRequestRepository
from leave_api.schemas.dashboard import DashboardResponse
from leave_api.services.leave_balance import build_balance_response
from leave_api.services.leave_request import build_leave_request_response

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_api.schemas.auth import AuthContext


async def get_dashboard(session: AsyncSession, auth: AuthContext) -> DashboardResponse:
    """Aggregate the caller's request history and balances. Nothing is stored."""
    history = await LeaveRequestRepository(session).list_by_employee(auth.user_id)
    balances = await LeaveBalanceRepository(session).list_by_employee(auth.user_id)
    return DashboardResponse(
        employee_id=auth.user_id,
        leave_history=[build_leave_request_response(r) for r in history],
        leave_balances=[build_balance_response(b) for b in balances],
        pending_count=sum(1 for r in history if r.status == LeaveStatus.PENDING.value),
        generated_at=datetime.now(UTC),
    )
