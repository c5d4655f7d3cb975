"""Integration tests for regions, tasks and weekly tasks beneath a goal."""

from __future__ import annotations

from collections.abc import Callable
import uuid

from fastapi.testclient import TestClient

API_PREFIX = "/api"


def _post(test_client: TestClient, path: str, payload: dict) -> dict:
    response = test_client.post(f"{API_PREFIX}{path}", json=payload)
    assert response.status_code == 201, response.json()
    return response.json()["data"]


def _build_tree(test_client: TestClient) -> dict[str, dict]:
    goal = _post(test_client, "/goals", {"title": "Write a novel"})
    region = _post(test_client, "/regions", {"goal_id": goal["id"], "title": "Research"})
    task = _post(
        test_client,
        "/tasks",
        {"region_id": region["id"], "title": "Read sources", "deadline": "2025-06-30T12:00:00Z"},
    )
    weekly_task = _post(
        test_client,
        "/weekly-tasks",
        {"task_id": task["id"], "title": "Chapter one notes", "priority": 2, "week_start_date": "2025-03-03"},
    )
    return {"goal": goal, "region": region, "task": task, "weekly_task": weekly_task}


def test_region_crud_under_owned_goal(user_client: TestClient) -> None:
    goal = _post(user_client, "/goals", {"title": "Get fit"})
    region = _post(user_client, "/regions", {"goal_id": goal["id"], "title": "Strength", "description": "Gym"})
    assert region["goal_id"] == goal["id"]

    listed = user_client.get(f"{API_PREFIX}/goals/{goal['id']}/regions")
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()["data"]] == [region["id"]]

    updated = user_client.put(f"{API_PREFIX}/regions/{region['id']}", json={"title": "Strength training"})
    assert updated.status_code == 200
    assert updated.json()["data"]["title"] == "Strength training"
    assert updated.json()["data"]["description"] is None

    deleted = user_client.delete(f"{API_PREFIX}/regions/{region['id']}")
    assert deleted.json() == {"success": True, "data": {"deleted": True}}
    assert user_client.get(f"{API_PREFIX}/regions/{region['id']}").json() == {
        "error": "Region not found",
        "code": "NOT_FOUND",
    }


def test_region_under_missing_goal_is_not_found(user_client: TestClient) -> None:
    response = user_client.post(f"{API_PREFIX}/regions", json={"goal_id": str(uuid.uuid4()), "title": "Orphan"})

    assert response.status_code == 404
    assert response.json() == {"error": "Goal not found", "code": "NOT_FOUND"}


def test_task_defaults_and_updates(user_client: TestClient) -> None:
    tree = _build_tree(user_client)
    task = tree["task"]
    assert task["status"] == "active"
    assert task["region_id"] == tree["region"]["id"]

    updated = user_client.put(
        f"{API_PREFIX}/tasks/{task['id']}",
        json={"title": "Read more sources", "deadline": "2025-07-31", "status": "completed"},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["status"] == "completed"
    assert updated.json()["data"]["title"] == "Read more sources"

    invalid = user_client.put(
        f"{API_PREFIX}/tasks/{task['id']}",
        json={"title": "Read more sources", "deadline": "2025-07-31", "status": "archived"},
    )
    assert invalid.status_code == 400
    assert invalid.json()["validationErrors"] == [
        {"field": "status", "message": "Status must be active, incomplete, or completed"}
    ]


def test_task_listing_filters_by_region(user_client: TestClient) -> None:
    tree = _build_tree(user_client)
    other_region = _post(user_client, "/regions", {"goal_id": tree["goal"]["id"], "title": "Drafting"})
    other_task = _post(
        user_client,
        "/tasks",
        {"region_id": other_region["id"], "title": "Outline", "deadline": "2025-05-01"},
    )

    everything = user_client.get(f"{API_PREFIX}/tasks").json()["data"]
    assert {item["id"] for item in everything} == {tree["task"]["id"], other_task["id"]}

    filtered = user_client.get(f"{API_PREFIX}/tasks", params={"region_id": other_region["id"]}).json()["data"]
    assert [item["id"] for item in filtered] == [other_task["id"]]

    bad_filter = user_client.get(f"{API_PREFIX}/tasks", params={"region_id": "nope"})
    assert bad_filter.status_code == 400
    assert bad_filter.json()["validationErrors"] == [{"field": "region_id", "message": "Invalid region ID"}]


def test_weekly_tasks_are_listed_by_priority_and_week(user_client: TestClient) -> None:
    tree = _build_tree(user_client)
    task_id = tree["task"]["id"]
    urgent = _post(
        user_client,
        "/weekly-tasks",
        {"task_id": task_id, "title": "Interview expert", "priority": 1, "week_start_date": "2025-03-03"},
    )
    later = _post(
        user_client,
        "/weekly-tasks",
        {"task_id": task_id, "title": "Archive visit", "priority": 3, "week_start_date": "2025-03-10"},
    )
    assert urgent["status"] == "pending"

    week = user_client.get(
        f"{API_PREFIX}/weekly-tasks",
        params={"task_id": task_id, "week_start_date": "2025-03-03"},
    ).json()["data"]
    assert [item["id"] for item in week] == [urgent["id"], tree["weekly_task"]["id"]]

    all_weeks = user_client.get(f"{API_PREFIX}/weekly-tasks", params={"task_id": task_id}).json()["data"]
    assert {item["id"] for item in all_weeks} == {urgent["id"], tree["weekly_task"]["id"], later["id"]}

    missing_task = user_client.get(f"{API_PREFIX}/weekly-tasks")
    assert missing_task.status_code == 400
    assert missing_task.json()["validationErrors"] == [{"field": "task_id", "message": "Invalid task ID"}]


def test_weekly_task_update_validates_priority_and_status(user_client: TestClient) -> None:
    weekly_task = _build_tree(user_client)["weekly_task"]
    path = f"{API_PREFIX}/weekly-tasks/{weekly_task['id']}"

    updated = user_client.put(
        path,
        json={"title": "Chapter one notes", "priority": 1, "week_start_date": "2025-03-03", "status": "in_progress"},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["priority"] == 1
    assert updated.json()["data"]["status"] == "in_progress"

    invalid = user_client.put(
        path,
        json={"title": "Chapter one notes", "priority": 5, "week_start_date": "2025-03-03", "status": "done"},
    )
    assert invalid.status_code == 400
    assert {item["field"]: item["message"] for item in invalid.json()["validationErrors"]} == {
        "priority": "Priority must be 1, 2, or 3",
        "status": "Status must be pending, in_progress, or completed",
    }


def test_deleting_a_goal_removes_everything_beneath_it(user_client: TestClient) -> None:
    tree = _build_tree(user_client)

    response = user_client.delete(f"{API_PREFIX}/goals/{tree['goal']['id']}")
    assert response.status_code == 200

    assert user_client.get(f"{API_PREFIX}/regions/{tree['region']['id']}").status_code == 404
    assert user_client.get(f"{API_PREFIX}/tasks/{tree['task']['id']}").status_code == 404
    assert user_client.get(f"{API_PREFIX}/weekly-tasks/{tree['weekly_task']['id']}").status_code == 404
    assert user_client.get(f"{API_PREFIX}/tasks").json()["data"] == []


def test_nested_resources_of_other_users_are_hidden(make_user_client: Callable[[str], TestClient]) -> None:
    alice = make_user_client("alice@example.com")
    bob = make_user_client("bob@example.com")
    tree = _build_tree(alice)

    checks = [
        (f"/regions/{tree['region']['id']}", "Region not found"),
        (f"/tasks/{tree['task']['id']}", "Task not found"),
        (f"/weekly-tasks/{tree['weekly_task']['id']}", "Weekly task not found"),
    ]
    for path, message in checks:
        response = bob.get(f"{API_PREFIX}{path}")
        assert response.status_code == 404
        assert response.json() == {"error": message, "code": "NOT_FOUND"}

    sneaky_task = bob.post(
        f"{API_PREFIX}/tasks",
        json={"region_id": tree["region"]["id"], "title": "Sneak in", "deadline": "2025-06-01"},
    )
    assert sneaky_task.status_code == 404
    assert sneaky_task.json() == {"error": "Region not found", "code": "NOT_FOUND"}

    assert bob.get(f"{API_PREFIX}/tasks").json()["data"] == []
    assert bob.get(f"{API_PREFIX}/goals/{tree['goal']['id']}/regions").status_code == 404
