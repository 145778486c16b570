# ruff: noqa: TC003
from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from leave_api.exceptions import Conflict, Forbidden, NotFound, Unauthorized
from leave_api.models.enums import EmployeeRole
from leave_api.repositories.employee import EmployeeRepository
from leave_api.schemas.auth import AuthContext
from leave_api.schemas.employee import EmployeeResponse

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from leave_api.models.employee import Employee
    from leave_api.schemas.employee import LoginRequest, RegisterEmployeeRequest

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid token: Employee ID not found."


def build_employee_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        email=employee.email,
        full_name=employee.full_name,
        role=EmployeeRole(employee.role),
        created_at=employee.created_at,
    )


async def resolve_caller(session: AsyncSession, raw_employee_id: str | None) -> AuthContext:
    """Turn the identity carried by a request into an AuthContext.

    The role comes from the stored employee record, never from the request.
    """
    if not raw_employee_id:
        raise Unauthorized(INVALID_TOKEN_MESSAGE)
    try:
        employee_id = uuid.UUID(raw_employee_id)
    except ValueError:
        raise Unauthorized(INVALID_TOKEN_MESSAGE) from None

    employee = await EmployeeRepository(session).get_by_id(employee_id)
    if employee is None:
        raise Unauthorized(INVALID_TOKEN_MESSAGE)
    return AuthContext(user_id=employee.id, email=employee.email, role=EmployeeRole(employee.role))


async def register_employee(
    session: AsyncSession,
    payload: RegisterEmployeeRequest,
    caller: AuthContext | None = None,
) -> EmployeeResponse:
    """Create an identity record; emails are unique case-insensitively.

    Anyone may register as an Employee. Only an existing manager may
    register another Manager.
    """
    if payload.role == EmployeeRole.MANAGER and (caller is None or not caller.is_manager):
        raise Forbidden("Only a manager can register another manager.")

    employees = EmployeeRepository(session)
    if await employees.get_by_email(payload.email) is not None:
        raise Conflict("An employee with this email already exists.", code="DUPLICATE_EMAIL")

    employee = await employees.create(
        email=payload.email,
        full_name=payload.full_name,
        password=payload.password,
        role=payload.role,
    )
    await session.commit()
    logger.info("Registered %s %s", employee.role, employee.id)
    return build_employee_response(employee)


async def authenticate(session: AsyncSession, payload: LoginRequest) -> EmployeeResponse:
    """Verify credentials. Unknown email and wrong password are indistinguishable."""
    employees = EmployeeRepository(session)
    employee = await employees.get_by_email(payload.email)
    if employee is None or not employees.check_password(employee, payload.password):
        raise Unauthorized("Invalid email or password.", code="INVALID_CREDENTIALS")
    return build_employee_response(employee)


async def get_employee(session: AsyncSession, employee_id: uuid.UUID) -> EmployeeResponse:
    employee = await EmployeeRepository(session).get_by_id(employee_id)
    if employee is None:
        raise NotFound("Employee not found.", code="EMPLOYEE_NOT_FOUND")
    return build_employee_response(employee)
