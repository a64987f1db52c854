"""Tests for the command-line client."""

import httpx

from diet_hub import cli
from diet_hub.adapters.json_profile_store import JsonFileProfileStore
from diet_hub.adapters.profile_api_client import HttpxHealthProfileClient
from tests.conftest import make_profile


def _patch_remote(monkeypatch, handler) -> list[str]:
    base_urls: list[str] = []

    def create(base_url: str, admin_token: str | None = None):
        base_urls.append(base_url)
        return HttpxHealthProfileClient(
            base_url=base_url,
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
            admin_token=admin_token,
        )

    monkeypatch.setattr(HttpxHealthProfileClient, "create", create)
    return base_urls


def test_profile_command_prints_remote_plan(monkeypatch, tmp_path, capsys) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "userId": "user-1",
                "age": 30,
                "gender": "male",
                "heightCm": 175,
                "weightKg": 95,
                "activityLevel": "sedentary",
                "healthGoal": "build_muscle",
            },
        )

    base_urls = _patch_remote(monkeypatch, handler)

    exit_code = cli.main(
        [
            "profile",
            "user-1",
            "--api-url",
            "http://api.test",
            "--local-store",
            str(tmp_path / "profiles.json"),
        ]
    )

    output = capsys.readouterr().out
    assert exit_code == 0
    assert base_urls == ["http://api.test"]
    assert "Profile: user-1" in output
    assert "(Obese)" in output
    assert "* Protein:" in output


def test_profile_command_falls_back_to_local_store(
    monkeypatch, tmp_path, capsys
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    _patch_remote(monkeypatch, handler)
    path = tmp_path / "profiles.json"
    JsonFileProfileStore(path).store(make_profile())

    exit_code = cli.main(["profile", "user-1", "--local-store", str(path)])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "BMI: 22.9 (Normal)" in output
    assert "Protein: 148g (40%)" in output


def test_profile_command_missing_profile(monkeypatch, tmp_path, capsys) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    _patch_remote(monkeypatch, handler)

    exit_code = cli.main(
        ["profile", "ghost", "--local-store", str(tmp_path / "profiles.json")]
    )

    assert exit_code == 1
    assert "No profile found for ghost" in capsys.readouterr().out


def test_recipes_command_filters_catalog(capsys) -> None:
    exit_code = cli.main(
        ["recipes", "--meal-type", "breakfast", "--sort", "calories-desc"]
    )

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines[0] == "Found 3 recipes"
    assert "Avocado & Poached Egg Toast" in lines[1]
    assert "Greek Yogurt Berry Parfait" in lines[3]


def test_recipes_command_search(capsys) -> None:
    cli.main(["recipes", "--search", "salmon"])

    output = capsys.readouterr().out
    assert "Found 1 recipes" in output
    assert "Pan-Seared Salmon with Asparagus" in output
