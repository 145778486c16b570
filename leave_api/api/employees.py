# ruff: noqa: B008, TC001, TC003
from __future__ import annotations

import uuid

from fastapi import APIRouter, Header, status

from leave_api.api.deps import AuthDep
from leave_api.db import SessionDep
from leave_api.schemas.employee import EmployeeResponse, LoginRequest, RegisterEmployeeRequest
from leave_api.services import employee as employee_service

employees_router = APIRouter(prefix="/api/Employee", tags=["employees"])


@employees_router.post("/register", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def register_employee(
    payload: RegisterEmployeeRequest,
    session: SessionDep,
    x_user_id: str | None = Header(default=None),
) -> EmployeeResponse:
    """Create an identity record. Registering a Manager requires a manager caller."""
    caller = await employee_service.resolve_caller(session, x_user_id) if x_user_id else None
    return await employee_service.register_employee(session, payload, caller)


@employees_router.post("/login", response_model=EmployeeResponse)
async def login(payload: LoginRequest, session: SessionDep) -> EmployeeResponse:
    """Verify an employee's credentials."""
    return await employee_service.authenticate(session, payload)


@employees_router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: uuid.UUID, session: SessionDep, auth: AuthDep) -> EmployeeResponse:
    return await employee_service.get_employee(session, employee_id)
