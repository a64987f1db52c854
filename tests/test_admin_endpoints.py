"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from diet_hub.api.app import create_app
from tests.conftest import (
    FailingProfileRepository,
    InMemoryProfileRepository,
    make_profile,
)

_HEADERS = {"X-Admin-Token": "admin-token"}


def test_admin_requires_token(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/admin/health-profiles").status_code == 401
    wrong = client.get("/admin/health-profiles", headers={"X-Admin-Token": "nope"})
    assert wrong.status_code == 401
    assert client.delete("/admin/health-profiles/user-1").status_code == 401


def test_admin_lists_profiles(container) -> None:
    repository = container.profile_service.remote
    assert isinstance(repository, InMemoryProfileRepository)
    repository.save(make_profile())
    repository.save(make_profile(user_id="user-2", age=45))
    client = TestClient(create_app(container))

    response = client.get("/admin/health-profiles", headers=_HEADERS)

    assert response.status_code == 200
    profiles = response.json()["profiles"]
    assert [profile["userId"] for profile in profiles] == ["user-1", "user-2"]
    assert profiles[1]["age"] == 45
    assert profiles[0]["activityLevel"] == "sedentary"


def test_admin_deletes_profile(container) -> None:
    repository = container.profile_service.remote
    assert isinstance(repository, InMemoryProfileRepository)
    repository.save(make_profile())
    client = TestClient(create_app(container))

    response = client.delete("/admin/health-profiles/user-1", headers=_HEADERS)

    assert response.status_code == 204
    assert repository.profiles == {}
    missing = client.delete("/admin/health-profiles/user-1", headers=_HEADERS)
    assert missing.status_code == 404


def test_admin_store_failure_returns_503(container) -> None:
    container.profile_service.remote = FailingProfileRepository()
    client = TestClient(create_app(container))

    assert client.get("/admin/health-profiles", headers=_HEADERS).status_code == 503
    deleted = client.delete("/admin/health-profiles/user-1", headers=_HEADERS)
    assert deleted.status_code == 503
