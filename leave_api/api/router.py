from fastapi import APIRouter

from leave_api.api.dashboard import dashboard_router
from leave_api.api.employees import employees_router
from leave_api.api.leave_balances import leave_balances_router
from leave_api.api.leave_requests import leave_requests_router
from leave_api.api.notifications import notifications_router

api_router = APIRouter()
api_router.include_router(employees_router)
api_router.include_router(leave_requests_router)
api_router.include_router(leave_balances_router)
api_router.include_router(notifications_router)
api_router.include_router(dashboard_router)
