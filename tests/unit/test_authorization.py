"""Unit tests for ownership and session checks."""

from __future__ import annotations

import uuid

import pytest

from goaltracker.core.authorization import ensure_owned
from goaltracker.core.authorization import require_identity
from goaltracker.core.errors import NotFoundError
from goaltracker.core.errors import UnauthorizedError
from goaltracker.core.security import SessionIdentity


def test_require_identity_returns_user_id() -> None:
    user_id = uuid.uuid4()

    assert require_identity(SessionIdentity(user_id=user_id)) == user_id


def test_require_identity_without_session_is_unauthorized() -> None:
    with pytest.raises(UnauthorizedError) as exc_info:
        require_identity(None, message="You must be logged in to view your profile")

    assert exc_info.value.to_error().to_payload() == {
        "error": "You must be logged in to view your profile",
        "code": "UNAUTHORIZED",
    }


def test_ensure_owned_returns_resource_for_owner() -> None:
    owner = uuid.uuid4()

    assert ensure_owned(("goal", owner), owner, message="Goal not found") == "goal"


def test_missing_and_foreign_resources_fail_identically() -> None:
    with pytest.raises(NotFoundError) as missing:
        ensure_owned(None, uuid.uuid4(), message="Goal not found")
    with pytest.raises(NotFoundError) as foreign:
        ensure_owned(("goal", uuid.uuid4()), uuid.uuid4(), message="Goal not found")

    assert missing.value.to_error() == foreign.value.to_error()
