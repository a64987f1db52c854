"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from diet_hub.api.models import HealthProfileResponse
from diet_hub.services.profiles import ProfileStoreError

if TYPE_CHECKING:
    from diet_hub.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])

_logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health-profiles", dependencies=[Depends(require_admin)])
async def list_profiles(request: Request) -> dict[str, object]:
    """Return every stored health profile."""
    container: AppContainer = request.app.state.container
    try:
        profiles = container.profile_service.list_profiles()
    except ProfileStoreError as exc:
        _logger.exception("Failed to list health profiles")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE) from exc
    return {
        "profiles": [
            HealthProfileResponse.from_domain(profile).model_dump(
                mode="json", by_alias=True
            )
            for profile in profiles
        ]
    }


@router.delete(
    "/health-profiles/{user_id}",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_profile(user_id: str, request: Request) -> Response:
    """Delete the health profile of a user."""
    container: AppContainer = request.app.state.container
    try:
        deleted = container.profile_service.delete_profile(user_id)
    except ProfileStoreError as exc:
        _logger.exception("Failed to delete health profile %s", user_id)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE) from exc
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
