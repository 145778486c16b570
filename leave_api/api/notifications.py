from __future__ import annotations

from fastapi import APIRouter

from leave_api.api.deps import AuthDep
from leave_api.db import SessionDep
from leave_api.schemas.notification import NotificationListResponse
from leave_api.services import notification as notification_service

notifications_router = APIRouter(prefix="/api/Notification", tags=["notifications"])


@notifications_router.get("", response_model=NotificationListResponse)
async def list_my_notifications(session: SessionDep, auth: AuthDep) -> NotificationListResponse:
    """List notification records involving the caller."""
    return await notification_service.list_notifications(session, auth.user_id)
