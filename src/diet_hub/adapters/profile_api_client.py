"""DietHub REST API client for health profiles."""

from dataclasses import dataclass
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from diet_hub.api.models import HealthProfileResponse
from diet_hub.domain.profiles import HealthProfile
from diet_hub.services.profiles import ProfileRepository, ProfileStoreError

_NOT_FOUND = 404


@dataclass
class HttpxHealthProfileClient(ProfileRepository):
    """HTTPX-backed client for a remote DietHub API."""

    base_url: str
    http_client: httpx.Client
    admin_token: str | None = None
    timeout: float = 10

    @classmethod
    def create(
        cls, base_url: str, admin_token: str | None = None
    ) -> "HttpxHealthProfileClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.Client(),
            admin_token=admin_token,
        )

    def get_by_user_id(self, user_id: str) -> HealthProfile | None:
        """Fetch a profile; a 404 means the user has none."""
        response = self._send("GET", f"/api/health-profiles/user/{_segment(user_id)}")
        if response is None:
            return None
        return _decode_profile(_decode_json(response))

    def save(self, profile: HealthProfile) -> HealthProfile:
        """Submit a profile for creation or update."""
        payload = HealthProfileResponse.from_domain(profile).model_dump(
            mode="json",
            by_alias=True,
            exclude={"bmi", "created_at", "updated_at"},
        )
        response = self._send("POST", "/api/health-profiles", json=payload)
        if response is None:
            raise ProfileStoreError("Profile endpoint not found")
        return _decode_profile(_decode_json(response))

    def list_profiles(self) -> list[HealthProfile]:
        """List all profiles through the admin API."""
        response = self._send("GET", "/admin/health-profiles", admin=True)
        if response is None:
            return []
        payload = _decode_json(response)
        items = payload.get("profiles", []) if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise ProfileStoreError("Unexpected profile list payload")
        return [_decode_profile(item) for item in items]

    def delete(self, user_id: str) -> bool:
        """Delete a profile through the admin API."""
        response = self._send(
            "DELETE", f"/admin/health-profiles/{_segment(user_id)}", admin=True
        )
        return response is not None

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()

    def _send(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, object] | None = None,
        admin: bool = False,
    ) -> httpx.Response | None:
        headers = {}
        if admin and self.admin_token:
            headers["X-Admin-Token"] = self.admin_token
        try:
            response = self.http_client.request(
                method,
                f"{self.base_url}{path}",
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
            if response.status_code == _NOT_FOUND:
                return None
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ProfileStoreError(f"{method} {path} failed: {exc}") from exc
        return response


def _segment(value: str) -> str:
    return quote(value, safe="")


def _decode_json(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError as exc:
        raise ProfileStoreError(
            f"Invalid JSON from {response.request.url}: {exc}"
        ) from exc


def _decode_profile(payload: object) -> HealthProfile:
    try:
        return HealthProfileResponse.model_validate(payload).to_domain()
    except ValidationError as exc:
        raise ProfileStoreError(f"Invalid profile payload: {exc}") from exc
