"""Client for the partner application's sidebar configuration API."""

import asyncio
from typing import Any

import aiohttp
from fastapi import status

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.utils.logger import get_logger
from src.utils.settings.partner import PartnerSettings

logger = get_logger(__name__)

SIDEBAR_CONFIG_PATH = "/api/admin/sidebar-config"


class SidebarConfigClient:
    """Forwards sidebar configuration reads and writes to the partner API."""

    def __init__(self, base_url: str | None = None, timeout: int | None = None):
        settings = PartnerSettings()
        self.base_url = (base_url or settings.PARTNER_API_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.PARTNER_API_TIMEOUT

    @property
    def url(self) -> str:
        return f"{self.base_url}{SIDEBAR_CONFIG_PATH}"

    async def fetch_config(self, authorization: str | None = None) -> dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        if authorization:
            headers["Authorization"] = authorization
        data = await self._request("GET", headers=headers)
        if not isinstance(data, dict):
            raise AdminConsoleException(
                MessageCode.UPSTREAM_FAILURE,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"description": "Partner returned a non-object sidebar config"},
            )
        return data

    async def update_config(self, payload: dict[str, Any], authorization: str) -> Any:
        headers = {
            "Content-Type": "application/json",
            "Authorization": authorization,
        }
        return await self._request("POST", headers=headers, json=payload)

    async def _request(self, method: str, **kwargs: Any) -> Any:
        async with aiohttp.ClientSession() as session:
            try:
                async with session.request(
                    method,
                    self.url,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                    **kwargs,
                ) as response:
                    if response.status >= 400:
                        partner_error = await self._read_error(response)
                        logger.error(
                            "Partner sidebar API returned an error",
                            method=method,
                            status=response.status,
                            partner_error=partner_error,
                        )
                        raise AdminConsoleException(
                            MessageCode.UPSTREAM_FAILURE,
                            status.HTTP_500_INTERNAL_SERVER_ERROR,
                            {
                                "partner_status": response.status,
                                "partner_error": partner_error,
                            },
                            message=(
                                "Failed to update sidebar config"
                                if method == "POST"
                                else "Failed to fetch sidebar config"
                            ),
                        )
                    return await response.json(content_type=None)
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                logger.error(
                    "Partner sidebar API unreachable", method=method, error=str(e)
                )
                raise AdminConsoleException(
                    MessageCode.UPSTREAM_FAILURE,
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    {"description": f"Partner API unavailable: {e}"},
                ) from e

    @staticmethod
    async def _read_error(response: aiohttp.ClientResponse) -> Any:
        try:
            return await response.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError):
            return {"error": response.reason}


async def get_sidebar_client() -> SidebarConfigClient:
    """Get partner sidebar client for dependency injection."""
    return SidebarConfigClient()
