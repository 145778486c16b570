from __future__ import annotations

from fastapi import APIRouter

from leave_api.api.deps import AuthDep
from leave_api.db import SessionDep
from leave_api.schemas.dashboard import DashboardResponse
from leave_api.services import dashboard as dashboard_service

dashboard_router = APIRouter(prefix="/api/Dashboard", tags=["dashboard"])


@dashboard_router.get("", response_model=DashboardResponse)
async def get_dashboard(session: SessionDep, auth: AuthDep) -> DashboardResponse:
    """Leave history and balances for the caller, derived on read."""
    return await dashboard_service.get_dashboard(session, auth)
