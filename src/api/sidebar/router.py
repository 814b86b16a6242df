"""Sidebar configuration proxy endpoints."""

from typing import Any

from fastapi import APIRouter, Response

from src.api.core.constants import SIDEBAR_VERSION_HEADER
from src.api.core.dependencies import (
    AdminCallerDep,
    CurrentCallerDep,
    OptionalAuthorizationDep,
    SidebarConfigServiceDep,
)
from src.api.sidebar.schemas import SidebarConfigUpdateRequest

router = APIRouter(tags=["sidebar"])


def _set_version_header(response: Response, version: int | None) -> None:
    if version is not None:
        response.headers[SIDEBAR_VERSION_HEADER] = str(version)


@router.get("/sidebar-config")
async def get_sidebar_config(
    response: Response,
    authorization: OptionalAuthorizationDep,
    sidebar_service: SidebarConfigServiceDep,
) -> dict[str, Any]:
    """Shared sidebar config from the partner, with catalog and version."""
    config = await sidebar_service.get_shared_config(authorization)
    _set_version_header(response, config.get("version"))
    return config


@router.post("/sidebar-config")
async def update_sidebar_config(
    request_data: SidebarConfigUpdateRequest,
    response: Response,
    caller: AdminCallerDep,
    sidebar_service: SidebarConfigServiceDep,
) -> Any:
    """Forward the enabled menu items to the partner and relay its response."""
    relayed = await sidebar_service.update_config(
        request_data.enabled_menu_items, request_data.version, caller
    )
    _set_version_header(response, relayed.version)
    return relayed.body


@router.get("/users/{user_id}/sidebar-config")
async def get_user_sidebar_config(
    user_id: str,
    response: Response,
    caller: CurrentCallerDep,
    sidebar_service: SidebarConfigServiceDep,
) -> dict[str, Any]:
    config = await sidebar_service.get_user_config(user_id)
    _set_version_header(response, config.get("version"))
    return config


@router.post("/users/{user_id}/sidebar-config")
async def update_user_sidebar_config(
    user_id: str,
    request_data: SidebarConfigUpdateRequest,
    response: Response,
    caller: AdminCallerDep,
    sidebar_service: SidebarConfigServiceDep,
) -> Any:
    # Writes the shared config; per-user storage does not exist yet
    relayed = await sidebar_service.update_config(
        request_data.enabled_menu_items,
        request_data.version,
        caller,
        user_id=user_id,
    )
    _set_version_header(response, relayed.version)
    return relayed.body
