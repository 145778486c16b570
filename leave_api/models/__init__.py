from sqlmodel import SQLModel

from leave_api.models.base import TimestampMixin, UUIDBase
from leave_api.models.employee import Employee
from leave_api.models.enums import EmployeeRole, LeaveStatus, LeaveType, NotificationType
from leave_api.models.leave_balance import LeaveBalance
from leave_api.models.leave_request import LeaveRequest
from leave_api.models.notification import Notification

__all__ = [
    "Employee",
    "EmployeeRole",
    "LeaveBalance",
    "LeaveRequest",
    "LeaveStatus",
    "LeaveType",
    "Notification",
    "NotificationType",
    "SQLModel",
    "TimestampMixin",
    "UUIDBase",
]
