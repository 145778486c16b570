# ruff: noqa: TC003
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import func, select
from sqlmodel import col
from werkzeug.security import check_password_hash, generate_password_hash

from leave_api.models.employee import Employee
from leave_api.models.enums import EmployeeRole

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class EmployeeRepository:
    """Identity records: lookup, creation and password verification."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, employee_id: uuid.UUID) -> Employee | None:
        return await self._session.get(Employee, employee_id)

    async def get_by_email(self, email: str) -> Employee | None:
        result = await self._session.execute(
            select(Employee).where(func.lower(col(Employee.email)) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Employee]:
        result = await self._session.execute(select(Employee).order_by(col(Employee.email)))
        return list(result.scalars().all())

    async def create(
        self,
        *,
        email: str,
        full_name: str,
        password: str,
        role: EmployeeRole = EmployeeRole.EMPLOYEE,
    ) -> Employee:
        """Add a new employee with a hashed password and flush to obtain its row."""
        employee = Employee(
            email=email.strip().lower(),
            full_name=full_name,
            role=role.value,
            password_hash=generate_password_hash(password),
        )
        self._session.add(employee)
        await self._session.flush()
        return employee

    def check_password(self, employee: Employee, password: str) -> bool:
        return check_password_hash(employee.password_hash, password)
