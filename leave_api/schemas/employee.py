# ruff: noqa: TC001, TC003
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from leave_api.models.enums import EmployeeRole


class RegisterEmployeeRequest(BaseModel):
    """Request body for creating an identity record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    full_name: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=8, max_length=128)
    role: EmployeeRole = EmployeeRole.EMPLOYEE


class LoginRequest(BaseModel):
    """Credentials to verify against a stored employee."""

    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)


class EmployeeResponse(BaseModel):
    """Response schema for an employee. Never includes the password hash."""

    id: uuid.UUID
    email: str
    full_name: str
    role: EmployeeRole
    created_at: datetime
