# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from leave_api.config import get_settings
from leave_api.exceptions import Conflict, Forbidden, NotFound, ValidationError
from leave_api.models.enums import EmployeeRole, LeaveStatus, LeaveType, NotificationType
from leave_api.models.leave_request import LeaveRequest
from leave_api.models.notification import Notification
from leave_api.repositories.employee import EmployeeRepository
from leave_api.repositories.leave_balance import LeaveBalanceRepository
from leave_api.repositories.leave_request import LeaveRequestRepository
from leave_api.repositories.notification import NotificationRepository
from leave_api.schemas.leave_request import (
    ApplyLeaveResponse,
    DecisionResponse,
    LeaveRequestListResponse,
    LeaveRequestResponse,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_api.schemas.auth import AuthContext
    from leave_api.schemas.leave_request import ApplyLeavePayload

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def processing_today() -> date:
    """Current calendar date in the configured processing time zone."""
    return datetime.now(ZoneInfo(get_settings().timezone)).date()


def build_leave_request_response(leave_request: LeaveRequest) -> LeaveRequestResponse:
    """Map a leave request model to its response schema."""
    return LeaveRequestResponse(
        id=leave_request.id,
        employee_id=leave_request.employee_id,
        manager_id=leave_request.manager_id,
        leave_type=LeaveType(leave_request.leave_type),
        start_date=leave_request.start_date,
        end_date=leave_request.end_date,
        days=leave_request.day_span(),
        reason=leave_request.reason,
        status=LeaveStatus(leave_request.status),
        date_requested=leave_request.date_requested,
        date_actioned=leave_request.date_actioned,
    )


def _build_list_response(requests: list[LeaveRequest]) -> LeaveRequestListResponse:
    return LeaveRequestListResponse(
        items=[build_leave_request_response(r) for r in requests],
        total=len(requests),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


async def submit_leave_request(
    session: AsyncSession,
    auth: AuthContext,
    payload: ApplyLeavePayload,
) -> ApplyLeaveResponse:
    """Create a PENDING leave request for the caller.

    Flow:
    1. Reject start dates before today (same day is allowed)
    2. Reject end dates before the start date
    3. Resolve the optional approving manager
    4. Insert the request and, if a manager is named, a LeaveRequested notification
    5. Commit

    No balance is touched until approval.
    """
    today = processing_today()

    # 1. Past dates.
    if payload.start_date < today:
        raise ValidationError("Cannot apply for past dates.", code="PAST_START_DATE")

    leave_request = LeaveRequest(
        employee_id=auth.user_id,
        manager_id=payload.manager_id,
        leave_type=payload.leave_type.value,
        start_date=payload.start_date,
        end_date=payload.end_date,
        reason=payload.reason,
        status=LeaveStatus.PENDING.value,
        date_requested=datetime.now(UTC),
    )

    # 2. Date range; the start is already known not to be in the past.
    if not leave_request.is_valid_request(today):
        raise ValidationError("End date cannot be before start date.", code="INVALID_DATE_RANGE")

    # 3. Manager.
    if payload.manager_id is not None:
        manager = await EmployeeRepository(session).get_by_id(payload.manager_id)
        if manager is None or manager.role != EmployeeRole.MANAGER.value:
            raise ValidationError("Assigned manager not found.", code="UNKNOWN_MANAGER")

    # 4. Persist.
    await LeaveRequestRepository(session).create(leave_request)

    if payload.manager_id is not None:
        await NotificationRepository(session).create(
            Notification(
                employee_id=auth.user_id,
                manager_id=payload.manager_id,
                type=NotificationType.LEAVE_REQUESTED.value,
                message=(
                    f"{auth.email} requested {payload.leave_type.value} leave "
                    f"from {payload.start_date.isoformat()} to {payload.end_date.isoformat()}."
                ),
            )
        )

    # 5. Commit.
    await session.commit()
    logger.info(
        "Leave request %s submitted by %s: %s %s..%s",
        leave_request.id,
        auth.user_id,
        leave_request.leave_type,
        leave_request.start_date,
        leave_request.end_date,
    )
    return ApplyLeaveResponse(message="Leave request submitted successfully.", id=leave_request.id)


async def decide_leave_request(
    session: AsyncSession,
    auth: AuthContext,
    request_id: uuid.UUID,
    is_approved: bool,
) -> DecisionResponse:
    """Approve or reject a PENDING request in a single transaction.

    1. Lock the request row; 404 if missing, 403 if assigned to another
       manager, 409 if no longer PENDING.
    2. On approval, lock the balance for (employee, leave type) and refuse
       unless it covers the full inclusive day span, then debit it.
    3. Stamp status, date_actioned and the approving manager.
    4. Record a notification for the employee.
    5. Commit balance, request and notification together.
    """
    requests = LeaveRequestRepository(session)

    # 1. Fetch and validate.
    leave_request = await requests.get_by_id(request_id, for_update=True)
    if leave_request is None:
        raise NotFound("Leave request not found.", code="REQUEST_NOT_FOUND")
    if leave_request.manager_id is not None and leave_request.manager_id != auth.user_id:
        raise Forbidden("Leave request is assigned to another manager.", code="NOT_OWNER")
    if leave_request.status != LeaveStatus.PENDING.value:
        raise Conflict("Leave request has already been actioned.", code="ALREADY_ACTIONED")

    # 2. Balance.
    if is_approved:
        balances = LeaveBalanceRepository(session)
        days = leave_request.day_span()
        balance = await balances.get(leave_request.employee_id, LeaveType(leave_request.leave_type), for_update=True)
        if balance is None or balance.remaining_days < days:
            logger.warning(
                "Refusing approval of %s: %d day(s) requested, %s remaining",
                leave_request.id,
                days,
                "no balance" if balance is None else balance.remaining_days,
            )
            raise ValidationError("Insufficient leave balance.", code="INSUFFICIENT_BALANCE")

        balance.remaining_days -= days
        await balances.update(balance)
        new_status = LeaveStatus.APPROVED
        notification_type = NotificationType.LEAVE_APPROVED
    else:
        new_status = LeaveStatus.REJECTED
        notification_type = NotificationType.LEAVE_REJECTED

    # 3. Transition.
    leave_request.status = new_status.value
    leave_request.date_actioned = datetime.now(UTC)
    if leave_request.manager_id is None:
        leave_request.manager_id = auth.user_id
    await requests.update(leave_request)

    # 4. Notification record.
    await NotificationRepository(session).create(
        Notification(
            employee_id=leave_request.employee_id,
            manager_id=auth.user_id,
            type=notification_type.value,
            message=(
                f"Your {leave_request.leave_type} leave from {leave_request.start_date.isoformat()} "
                f"to {leave_request.end_date.isoformat()} was {new_status.value.lower()}."
            ),
        )
    )

    # 5. Commit.
    await session.commit()
    logger.info("Leave request %s %s by %s", leave_request.id, new_status.value.lower(), auth.user_id)
    return DecisionResponse(message="Leave request updated.", status=new_status)


async def get_leave_request(
    session: AsyncSession,
    auth: AuthContext,
    request_id: uuid.UUID,
) -> LeaveRequestResponse:
    """Get a single request. Employees may only read their own."""
    leave_request = await LeaveRequestRepository(session).get_by_id(request_id)
    if leave_request is None:
        raise NotFound("Leave request not found.", code="REQUEST_NOT_FOUND")
    if leave_request.employee_id != auth.user_id and not auth.is_manager:
        raise Forbidden("Not authorized to view this leave request.", code="NOT_OWNER")
    return build_leave_request_response(leave_request)


async def list_own_requests(session: AsyncSession, auth: AuthContext) -> LeaveRequestListResponse:
    requests = await LeaveRequestRepository(session).list_by_employee(auth.user_id)
    return _build_list_response(requests)


async def list_managed_requests(session: AsyncSession, auth: AuthContext) -> LeaveRequestListResponse:
    requests = await LeaveRequestRepository(session).list_by_manager(auth.user_id)
    return _build_list_response(requests)
