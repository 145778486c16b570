from __future__ import annotations

import enum


class EmployeeRole(enum.StrEnum):
    """Role carried by an employee's identity record."""

    EMPLOYEE = "Employee"
    MANAGER = "Manager"


class LeaveType(enum.StrEnum):
    """Kind of leave; each has its own balance."""

    ANNUAL = "Annual"
    SICK = "Sick"
    UNPAID = "Unpaid"


class LeaveStatus(enum.StrEnum):
    """State machine for leave requests: PENDING moves once to APPROVED or REJECTED."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class NotificationType(enum.StrEnum):
    """Event a notification record describes."""

    LEAVE_REQUESTED = "LeaveRequested"
    LEAVE_APPROVED = "LeaveApproved"
    LEAVE_REJECTED = "LeaveRejected"
