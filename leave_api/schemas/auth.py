# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid

from pydantic import BaseModel

from leave_api.models.enums import EmployeeRole


class AuthContext(BaseModel):
    """Caller identity resolved from the request and the employee record."""

    user_id: uuid.UUID
    email: str
    role: EmployeeRole = EmployeeRole.EMPLOYEE

    @property
    def is_manager(self) -> bool:
        return self.role == EmployeeRole.MANAGER
