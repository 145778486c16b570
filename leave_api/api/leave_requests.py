# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Body

from leave_api.api.deps import AuthDep, EmployeeDep, ManagerDep
from leave_api.db import SessionDep
from leave_api.schemas.leave_request import (
    ApplyLeavePayload,
    ApplyLeaveResponse,
    DecisionResponse,
    LeaveRequestListResponse,
    LeaveRequestResponse,
)
from leave_api.services import leave_request as leave_request_service

leave_requests_router = APIRouter(prefix="/api/LeaveRequest", tags=["leave-requests"])


@leave_requests_router.post("/apply", response_model=ApplyLeaveResponse)
async def apply_for_leave(
    payload: ApplyLeavePayload,
    session: SessionDep,
    auth: EmployeeDep,
) -> ApplyLeaveResponse:
    """Submit a leave request for the calling employee."""
    return await leave_request_service.submit_leave_request(session, auth, payload)


@leave_requests_router.post("/approve/{request_id}", response_model=DecisionResponse)
async def approve_leave_request(
    request_id: uuid.UUID,
    is_approved: Annotated[bool, Body()],
    session: SessionDep,
    auth: ManagerDep,
) -> DecisionResponse:
    """Approve (``true``) or reject (``false``) a pending request (manager only)."""
    return await leave_request_service.decide_leave_request(session, auth, request_id, is_approved)


@leave_requests_router.get("/mine", response_model=LeaveRequestListResponse)
async def list_my_leave_requests(session: SessionDep, auth: AuthDep) -> LeaveRequestListResponse:
    """List the caller's own requests."""
    return await leave_request_service.list_own_requests(session, auth)


@leave_requests_router.get("/managed", response_model=LeaveRequestListResponse)
async def list_managed_leave_requests(session: SessionDep, auth: ManagerDep) -> LeaveRequestListResponse:
    """List requests assigned to or decided by the calling manager."""
    return await leave_request_service.list_managed_requests(session, auth)


@leave_requests_router.get("/{request_id}", response_model=LeaveRequestResponse)
async def get_leave_request(
    request_id: uuid.UUID,
    session: SessionDep,
    auth: AuthDep,
) -> LeaveRequestResponse:
    """Get a single leave request."""
    return await leave_request_service.get_leave_request(session, auth, request_id)
