# ruff: noqa: B008, TC001
from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Header

from leave_api.db import SessionDep
from leave_api.exceptions import Forbidden
from leave_api.models.enums import EmployeeRole
from leave_api.schemas.auth import AuthContext
from leave_api.services.employee import resolve_caller


async def get_auth_context(
    session: SessionDep,
    x_user_id: str | None = Header(default=None),
) -> AuthContext:
    """Resolve the caller from the identity header against the employee table."""
    return await resolve_caller(session, x_user_id)


AuthDep = Annotated[AuthContext, Depends(get_auth_context)]


def require_role(role: EmployeeRole) -> Callable[[AuthContext], Awaitable[AuthContext]]:
    """Build a dependency that admits only callers holding ``role``."""

    async def _require_role(auth: AuthDep) -> AuthContext:
        if auth.role != role:
            raise Forbidden(f"{role.value} role required.")
        return auth

    return _require_role


EmployeeDep = Annotated[AuthContext, Depends(require_role(EmployeeRole.EMPLOYEE))]
ManagerDep = Annotated[AuthContext, Depends(require_role(EmployeeRole.MANAGER))]
