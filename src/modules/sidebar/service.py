"""Sidebar configuration: partner proxy plus console-side versioning."""

from dataclasses import dataclass
from typing import Any

from fastapi import status

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import AuthenticatedCallerContext
from src.modules.sidebar.catalog import catalog_as_dicts
from src.modules.sidebar.client import SidebarConfigClient
from src.modules.sidebar.versions import SidebarVersionStore
from src.utils.settings.partner import PartnerSettings


@dataclass
class RelayedUpdate:
    """Partner response body, untouched, and the console version it produced."""

    body: Any
    version: int | None


class SidebarConfigService(BaseService):
    def __init__(self, client: SidebarConfigClient, versions: SidebarVersionStore):
        super().__init__()
        self.client = client
        self.versions = versions

    async def current_version(self) -> int | None:
        """Version counter, or None when the store cannot be read."""
        try:
            return await self.versions.get_version()
        except AdminConsoleException as e:
            if e.message_code != MessageCode.UPSTREAM_FAILURE:
                raise
            self.logger.warning(
                "Sidebar version unavailable, serving config without it",
                details=e.details,
            )
            return None

    async def get_shared_config(self, authorization: str | None = None) -> dict[str, Any]:
        config = await self.client.fetch_config(authorization)
        config.setdefault("availableMenuItems", catalog_as_dicts())
        if config.get("enabledMenuItems") is None:
            config["enabledMenuItems"] = []
        version = await self.current_version()
        if version is not None:
            config["version"] = version
        return config

    async def get_user_config(self, user_id: str) -> dict[str, Any]:
        # Per-user configs are not stored; every user sees the shared one
        config = await self.get_shared_config()
        config["userId"] = user_id
        return config

    async def _advance_unversioned(self, caller: AuthenticatedCallerContext) -> int | None:
        try:
            return await self.versions.advance(None)
        except AdminConsoleException as e:
            if e.message_code != MessageCode.UPSTREAM_FAILURE:
                raise
            self.logger.warning(
                "Sidebar version not advanced for unversioned write",
                uid=caller.uid,
                details=e.details,
            )
            return None

    async def update_config(
        self,
        enabled_menu_items: list[str],
        version: int | None,
        caller: AuthenticatedCallerContext,
        user_id: str | None = None,
    ) -> RelayedUpdate:
        if version is None:
            if not PartnerSettings().SIDEBAR_ALLOW_UNVERSIONED_WRITES:
                raise AdminConsoleException(
                    MessageCode.VERSION_REQUIRED,
                    status.HTTP_428_PRECONDITION_REQUIRED,
                )
            new_version = await self._advance_unversioned(caller)
        else:
            new_version = await self.versions.advance(version)

        payload: dict[str, Any] = {"enabledMenuItems": enabled_menu_items}
        if user_id is not None:
            payload["userId"] = user_id
        result = await self.client.update_config(payload, caller.authorization_header)

        self.logger.info(
            "Sidebar config updated",
            uid=caller.uid,
            user_id=user_id,
            enabled_count=len(enabled_menu_items),
            supplied_version=version,
            version=new_version,
        )
        return RelayedUpdate(body=result, version=new_version)
