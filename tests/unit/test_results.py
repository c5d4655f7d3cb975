"""Unit tests for action result envelopes."""

from __future__ import annotations

import json

from pydantic import ValidationError
import pytest

from goaltracker.core.results import ActionError
from goaltracker.core.results import ActionErrorCode
from goaltracker.core.results import FieldError
from goaltracker.core.results import create_error
from goaltracker.core.results import create_success
from goaltracker.core.results import is_action_error
from goaltracker.core.results import is_action_success
from goaltracker.core.results import render_result


@pytest.mark.parametrize("code", list(ActionErrorCode))
def test_error_and_success_predicates_are_mutually_exclusive(code: ActionErrorCode) -> None:
    error = create_error("Request failed", code)
    payload = error.to_payload()

    assert payload == {"error": "Request failed", "code": code.value}
    assert is_action_error(error)
    assert not is_action_success(error)
    assert is_action_error(payload)
    assert not is_action_success(payload)


@pytest.mark.parametrize("data", [None, {"id": "1"}, [], "done"])
def test_success_envelopes_are_never_errors(data: object) -> None:
    success = create_success(data)
    payload = success.to_payload()

    assert is_action_success(success)
    assert not is_action_error(success)
    assert is_action_success(payload)
    assert not is_action_error(payload)


def test_predicates_recognize_wire_payloads() -> None:
    assert is_action_error({"error": "Unauthorized", "code": "UNAUTHORIZED"})
    assert not is_action_error({"error": "Unauthorized"})
    assert not is_action_error({"error": 1, "code": "UNAUTHORIZED"})
    assert not is_action_error(None)
    assert is_action_success({"success": True, "data": None})
    assert not is_action_success({"success": "true", "data": None})
    assert not is_action_success([True])


def test_validation_errors_key_is_omitted_unless_supplied() -> None:
    without = create_error("Validation failed. Please check your input.", ActionErrorCode.VALIDATION_ERROR)
    empty = create_error("Validation failed. Please check your input.", ActionErrorCode.VALIDATION_ERROR, [])

    assert without.to_payload() == {
        "error": "Validation failed. Please check your input.",
        "code": "VALIDATION_ERROR",
    }
    assert empty.to_payload() == {
        "error": "Validation failed. Please check your input.",
        "code": "VALIDATION_ERROR",
        "validationErrors": [],
    }


def test_field_errors_serialize_in_order() -> None:
    error = create_error(
        "Validation failed. Please check your input.",
        ActionErrorCode.VALIDATION_ERROR,
        [
            FieldError(field="title", message="Title is required"),
            FieldError(field="priority", message="Priority must be 1, 2, or 3"),
        ],
    )

    assert error.to_payload()["validationErrors"] == [
        {"field": "title", "message": "Title is required"},
        {"field": "priority", "message": "Priority must be 1, 2, or 3"},
    ]


def test_field_errors_only_accompany_validation_errors() -> None:
    with pytest.raises(ValidationError):
        create_error("Goal not found", ActionErrorCode.NOT_FOUND, [FieldError(field="id", message="missing")])


def test_field_error_requires_field_and_message() -> None:
    with pytest.raises(ValidationError):
        FieldError(field="", message="Title is required")
    with pytest.raises(ValidationError):
        FieldError(field="title", message="")


def test_success_payload_keeps_null_data() -> None:
    assert create_success(None).to_payload() == {"success": True, "data": None}


@pytest.mark.parametrize(
    ("code", "status_code"),
    [
        (ActionErrorCode.UNAUTHORIZED, 401),
        (ActionErrorCode.VALIDATION_ERROR, 400),
        (ActionErrorCode.NOT_FOUND, 404),
        (ActionErrorCode.DATABASE_ERROR, 500),
        (ActionErrorCode.UNKNOWN_ERROR, 500),
    ],
)
def test_render_result_maps_error_codes_to_http_statuses(code: ActionErrorCode, status_code: int) -> None:
    response = render_result(create_error("failed", code))

    assert response.status_code == status_code
    assert json.loads(response.body) == {"error": "failed", "code": code.value}


def test_render_result_uses_requested_success_status() -> None:
    response = render_result(create_success({"deleted": True}), success_status=201)

    assert response.status_code == 201
    assert json.loads(response.body) == {"success": True, "data": {"deleted": True}}


def test_render_result_rejects_other_values() -> None:
    with pytest.raises(TypeError):
        render_result({"success": True, "data": None})  # type: ignore[arg-type]


def test_action_error_accepts_wire_alias() -> None:
    error = ActionError.model_validate(
        {
            "error": "Validation failed. Please check your input.",
            "code": "VALIDATION_ERROR",
            "validationErrors": [{"field": "name", "message": "Name must be 100 characters or less"}],
        }
    )

    assert error.message == "Validation failed. Please check your input."
    assert error.validation_errors == [FieldError(field="name", message="Name must be 100 characters or less")]
