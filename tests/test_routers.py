from datetime import datetime, timezone

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from analytics import engine, schemas as analytics_schemas, service as analytics_service
from core.enums import TaskPriority, TaskStatus
from main import app
from releases import service as release_service
from tasks import schemas as task_schemas, service as task_service
from users import service as user_service

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def client():
    # No context manager: the lifespan (DB pool) is not started.
    return TestClient(app, raise_server_exceptions=False)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_completion_endpoint(client, monkeypatch):
    async def fake():
        return analytics_schemas.TaskCompletionAnalytics(
            overall_completion_percentage=57.14,
            average_completion_percentage_per_user=58.33,
            average_completion_percentage_per_release=0.0,
        )

    monkeypatch.setattr(analytics_service, "task_completion", fake)

    resp = client.get("/analytics/completion")

    assert resp.status_code == 200
    assert resp.json() == {
        "overall_completion_percentage": 57.14,
        "average_completion_percentage_per_user": 58.33,
        "average_completion_percentage_per_release": 0.0,
    }


def test_user_completion_endpoint_returns_list(client, monkeypatch):
    async def fake():
        return [analytics_schemas.UserCompletionAnalytics(user_id=1, user_name="Ian Conner", completion_percentage=50.0)]

    monkeypatch.setattr(analytics_service, "user_completion", fake)

    resp = client.get("/analytics/completion/users")

    assert resp.status_code == 200
    assert resp.json() == [{"user_id": 1, "user_name": "Ian Conner", "completion_percentage": 50.0}]


def test_release_completion_by_id_not_found(client, monkeypatch):
    async def fake(release_id):
        raise HTTPException(status_code=404, detail=f"Release with ID {release_id} not found.")

    monkeypatch.setattr(analytics_service, "release_completion_by_id", fake)

    resp = client.get("/analytics/completion/releases/42")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Release with ID 42 not found."


def test_broken_snapshot_becomes_500(client, monkeypatch):
    async def fake():
        raise engine.SnapshotIntegrityError("Task 1 references unknown release 99.")

    monkeypatch.setattr(analytics_service, "release_completion", fake)

    resp = client.get("/analytics/completion/releases")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "An error occurred while retrieving release analytics data."


def test_update_task_status(client, monkeypatch):
    calls = []

    async def fake(task_id, new_status):
        calls.append((task_id, new_status))
        return task_schemas.TaskResponse(
            id=task_id,
            release_id=10,
            status=new_status,
            priority=TaskPriority.HIGH,
            description="Pitch to playlists",
            due_date=NOW,
        )

    monkeypatch.setattr(task_service, "update_status", fake)

    resp = client.put("/tasks/5/status", json={"status": "Done"})

    assert resp.status_code == 200
    assert resp.json()["status"] == "Done"
    assert calls == [(5, TaskStatus.DONE)]


def test_update_task_status_rejects_unknown_status(client):
    resp = client.put("/tasks/5/status", json={"status": "Finished"})

    assert resp.status_code == 422


def test_delete_task_returns_204(client, monkeypatch):
    async def fake(task_id):
        return None

    monkeypatch.setattr(task_service, "delete_task", fake)

    resp = client.delete("/tasks/5")

    assert resp.status_code == 204


def test_create_release_validates_type(client):
    resp = client.post(
        "/releases",
        json={"user_id": 1, "title": "Neon Skyline", "type": "Boxset", "release_date": NOW.isoformat()},
    )

    assert resp.status_code == 422


def test_delete_release_not_found(client, monkeypatch):
    async def fake(release_id):
        raise HTTPException(status_code=404, detail=f"Release with ID {release_id} not found.")

    monkeypatch.setattr(release_service, "delete_release", fake)

    resp = client.delete("/releases/7")

    assert resp.status_code == 404


def test_user_by_name_route_is_not_shadowed_by_id(client, monkeypatch):
    seen = []

    async def fake(name):
        seen.append(name)
        raise HTTPException(status_code=404, detail=f"User with name '{name}' not found.")

    monkeypatch.setattr(user_service, "get_user_by_name", fake)

    resp = client.get("/users/name/Nobody")

    assert resp.status_code == 404
    assert seen == ["Nobody"]
