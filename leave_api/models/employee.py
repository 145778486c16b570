from __future__ import annotations

from sqlmodel import Field

from leave_api.models.base import TimestampMixin, UUIDBase
from leave_api.models.enums import EmployeeRole


class Employee(UUIDBase, TimestampMixin, table=True):
    """Identity record for a person who can request or approve leave."""

    __tablename__ = "employee"

    email: str = Field(max_length=255, unique=True, index=True)
    full_name: str = Field(max_length=255)
    role: str = Field(
        default=EmployeeRole.EMPLOYEE, max_length=50, sa_column_kwargs={"server_default": "Employee"}
    )
    password_hash: str = Field(max_length=255)
