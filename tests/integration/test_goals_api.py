"""Integration tests for goal endpoints and their result envelopes."""

from __future__ import annotations

from collections.abc import Callable
import uuid

from fastapi.testclient import TestClient

API_PREFIX = "/api"


def _create_goal(test_client: TestClient, title: str = "Run a marathon", **extra: object) -> dict:
    response = test_client.post(f"{API_PREFIX}/goals", json={"title": title, **extra})
    assert response.status_code == 201
    payload = response.json()
    assert payload["success"] is True
    return payload["data"]


def test_goal_lifecycle(user_client: TestClient) -> None:
    goal = _create_goal(user_client, description="Finish under four hours")
    uuid.UUID(goal["id"])
    assert goal["title"] == "Run a marathon"
    assert goal["description"] == "Finish under four hours"

    fetched = user_client.get(f"{API_PREFIX}/goals/{goal['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["id"] == goal["id"]

    updated = user_client.put(
        f"{API_PREFIX}/goals/{goal['id']}",
        json={"title": "Run two marathons", "description": ""},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["title"] == "Run two marathons"
    assert updated.json()["data"]["description"] is None

    listed = user_client.get(f"{API_PREFIX}/goals")
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()["data"]] == [goal["id"]]

    deleted = user_client.delete(f"{API_PREFIX}/goals/{goal['id']}")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "data": {"deleted": True}}

    missing = user_client.get(f"{API_PREFIX}/goals/{goal['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Goal not found", "code": "NOT_FOUND"}


def test_goal_input_is_sanitized_before_storage(user_client: TestClient) -> None:
    goal = _create_goal(
        user_client,
        title="<script>alert(1)</script>Learn piano",
        description="  onClick=evil javascript:void(0)  ",
    )

    assert goal["title"] == "alert(1)Learn piano"
    assert goal["description"] == "evil void(0)"


def test_invalid_goal_payload_returns_validation_envelope(user_client: TestClient) -> None:
    response = user_client.post(f"{API_PREFIX}/goals", json={"title": "<b></b>", "description": "x"})

    assert response.status_code == 400
    assert response.json() == {
        "error": "Validation failed. Please check your input.",
        "code": "VALIDATION_ERROR",
        "validationErrors": [{"field": "title", "message": "Title is required"}],
    }
    assert user_client.get(f"{API_PREFIX}/goals").json()["data"] == []


def test_non_object_body_is_rejected(user_client: TestClient) -> None:
    response = user_client.post(f"{API_PREFIX}/goals", json=["Run a marathon"])

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid input data"
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_malformed_goal_id_is_a_validation_error(user_client: TestClient) -> None:
    response = user_client.get(f"{API_PREFIX}/goals/not-a-uuid")

    assert response.status_code == 400
    assert response.json()["validationErrors"] == [{"field": "id", "message": "Invalid goal ID"}]


def test_foreign_goal_is_indistinguishable_from_missing_goal(
    make_user_client: Callable[[str], TestClient],
) -> None:
    alice = make_user_client("alice@example.com")
    bob = make_user_client("bob@example.com")
    goal = _create_goal(alice)

    foreign = bob.get(f"{API_PREFIX}/goals/{goal['id']}")
    missing = bob.get(f"{API_PREFIX}/goals/{uuid.uuid4()}")

    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json() == {"error": "Goal not found", "code": "NOT_FOUND"}

    for response in (
        bob.put(f"{API_PREFIX}/goals/{goal['id']}", json={"title": "Hijacked"}),
        bob.delete(f"{API_PREFIX}/goals/{goal['id']}"),
    ):
        assert response.status_code == 404
        assert response.json() == {"error": "Goal not found", "code": "NOT_FOUND"}

    assert bob.get(f"{API_PREFIX}/goals").json()["data"] == []
    assert alice.get(f"{API_PREFIX}/goals/{goal['id']}").json()["data"]["title"] == "Run a marathon"


def test_anonymous_requests_are_redirected_without_side_effects(
    client: TestClient,
    user_client: TestClient,
) -> None:
    response = client.post(f"{API_PREFIX}/goals", json={"title": "Sneaky"}, follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"].startswith("/auth/signin?callbackUrl=")
    assert user_client.get(f"{API_PREFIX}/goals").json()["data"] == []


def test_health_is_public(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
