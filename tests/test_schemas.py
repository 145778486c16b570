"""Unit tests for API schemas and the error hierarchy."""

from __future__ import annotations

import uuid
from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from leave_api.exceptions import AppError, Conflict, Forbidden, NotFound, Unauthorized, ValidationError
from leave_api.models.enums import EmployeeRole, LeaveStatus, LeaveType
from leave_api.schemas.employee import RegisterEmployeeRequest
from leave_api.schemas.leave_balance import SetBalanceRequest
from leave_api.schemas.leave_request import ApplyLeavePayload, DecisionResponse

# ---------------------------------------------------------------------------
# ApplyLeavePayload
# ---------------------------------------------------------------------------


def test_apply_payload_camel_case() -> None:
    manager_id = uuid.uuid4()
    payload = ApplyLeavePayload.model_validate(
        {
            "leaveType": "Sick",
            "startDate": "2030-01-02",
            "endDate": "2030-01-03",
            "reason": "Flu",
            "managerId": str(manager_id),
        }
    )
    assert payload.leave_type == LeaveType.SICK
    assert payload.start_date == date(2030, 1, 2)
    assert payload.manager_id == manager_id


def test_apply_payload_snake_case() -> None:
    payload = ApplyLeavePayload(leave_type=LeaveType.ANNUAL, start_date=date(2030, 1, 2), end_date=date(2030, 1, 2))
    assert payload.reason is None
    assert payload.manager_id is None


def test_apply_payload_rejects_unknown_leave_type() -> None:
    with pytest.raises(PydanticValidationError):
        ApplyLeavePayload.model_validate({"leaveType": "Gardening", "startDate": "2030-01-02", "endDate": "2030-01-02"})


def test_apply_payload_reason_length_limit() -> None:
    with pytest.raises(PydanticValidationError):
        ApplyLeavePayload(
            leave_type=LeaveType.ANNUAL,
            start_date=date(2030, 1, 2),
            end_date=date(2030, 1, 2),
            reason="x" * 1001,
        )


# ---------------------------------------------------------------------------
# Other schemas
# ---------------------------------------------------------------------------


def test_decision_response_serializes_capitalized_message() -> None:
    response = DecisionResponse(message="Leave request updated.", status=LeaveStatus.APPROVED)
    assert response.model_dump(by_alias=True, mode="json") == {
        "Message": "Leave request updated.",
        "status": "Approved",
    }


def test_register_request_defaults_to_employee() -> None:
    request = RegisterEmployeeRequest.model_validate(
        {"email": "x@example.com", "fullName": "X", "password": "12345678"}
    )
    assert request.role == EmployeeRole.EMPLOYEE


def test_set_balance_rejects_negative() -> None:
    with pytest.raises(PydanticValidationError):
        SetBalanceRequest(remaining_days=-1)


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("error_cls", "status_code"),
    [
        (Unauthorized, 401),
        (Forbidden, 403),
        (NotFound, 404),
        (Conflict, 409),
        (ValidationError, 400),
    ],
)
def test_error_default_status_codes(error_cls: type[AppError], status_code: int) -> None:
    error = error_cls("boom")
    assert isinstance(error, AppError)
    assert error.status_code == status_code
    assert error.message == "boom"


def test_error_code_and_status_override() -> None:
    error = ValidationError("Insufficient leave balance.", code="INSUFFICIENT_BALANCE")
    assert error.code == "INSUFFICIENT_BALANCE"
    assert Unauthorized("x").code == "MISSING_IDENTITY"
    assert AppError("x", status_code=418).status_code == 418
    assert AppError("x").code is None
