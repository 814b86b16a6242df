"""Partner sidebar client against a local aiohttp server."""

import pytest
import pytest_asyncio
from aiohttp import test_utils, web

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.modules.sidebar.client import SIDEBAR_CONFIG_PATH, SidebarConfigClient


class PartnerState:
    def __init__(self):
        self.status = 200
        self.body: object = {"enabledMenuItems": ["calendar"]}
        self.text: str | None = None
        self.requests: list[dict] = []


@pytest.fixture
def partner_state() -> PartnerState:
    return PartnerState()


@pytest_asyncio.fixture
async def partner_server(partner_state: PartnerState):
    async def handle(request: web.Request) -> web.Response:
        partner_state.requests.append(
            {
                "method": request.method,
                "authorization": request.headers.get("Authorization"),
                "json": await request.json() if request.can_read_body else None,
            }
        )
        if partner_state.text is not None:
            return web.Response(status=partner_state.status, text=partner_state.text)
        return web.json_response(partner_state.body, status=partner_state.status)

    app = web.Application()
    app.router.add_get(SIDEBAR_CONFIG_PATH, handle)
    app.router.add_post(SIDEBAR_CONFIG_PATH, handle)

    server = test_utils.TestServer(app)
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def client(partner_server: test_utils.TestServer) -> SidebarConfigClient:
    return SidebarConfigClient(
        base_url=f"http://{partner_server.host}:{partner_server.port}/", timeout=5
    )


@pytest.mark.asyncio
async def test_fetch_forwards_bearer_header(client, partner_state):
    config = await client.fetch_config("Bearer caller-token")

    assert config == {"enabledMenuItems": ["calendar"]}
    assert partner_state.requests == [
        {"method": "GET", "authorization": "Bearer caller-token", "json": None}
    ]


@pytest.mark.asyncio
async def test_fetch_without_header(client, partner_state):
    await client.fetch_config()

    assert partner_state.requests[0]["authorization"] is None


@pytest.mark.asyncio
async def test_update_posts_payload_and_relays_response(client, partner_state):
    partner_state.body = {"success": True, "enabledMenuItems": ["reports"]}

    result = await client.update_config(
        {"enabledMenuItems": ["reports"]}, "Bearer caller-token"
    )

    assert result == {"success": True, "enabledMenuItems": ["reports"]}
    assert partner_state.requests == [
        {
            "method": "POST",
            "authorization": "Bearer caller-token",
            "json": {"enabledMenuItems": ["reports"]},
        }
    ]


@pytest.mark.asyncio
async def test_partner_error_carries_partner_body(client, partner_state):
    partner_state.status = 403
    partner_state.body = {"error": "forbidden"}

    with pytest.raises(AdminConsoleException) as exc_info:
        await client.update_config({"enabledMenuItems": []}, "Bearer caller-token")

    assert exc_info.value.message_code == MessageCode.UPSTREAM_FAILURE
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Failed to update sidebar config"
    assert exc_info.value.details == {
        "partner_status": 403,
        "partner_error": {"error": "forbidden"},
    }


@pytest.mark.asyncio
async def test_partner_error_without_json_body(client, partner_state):
    partner_state.status = 502
    partner_state.text = "upstream exploded"

    with pytest.raises(AdminConsoleException) as exc_info:
        await client.fetch_config()

    assert exc_info.value.message == "Failed to fetch sidebar config"
    assert exc_info.value.details["partner_status"] == 502
    assert exc_info.value.details["partner_error"] == {"error": "Bad Gateway"}


@pytest.mark.asyncio
async def test_non_object_config_is_rejected(client, partner_state):
    partner_state.body = ["calendar"]

    with pytest.raises(AdminConsoleException) as exc_info:
        await client.fetch_config()

    assert exc_info.value.message_code == MessageCode.UPSTREAM_FAILURE


@pytest.mark.asyncio
async def test_unreachable_partner_is_upstream_failure():
    client = SidebarConfigClient(base_url="http://127.0.0.1:1", timeout=2)

    with pytest.raises(AdminConsoleException) as exc_info:
        await client.fetch_config()

    assert exc_info.value.message_code == MessageCode.UPSTREAM_FAILURE
    assert "Partner API unavailable" in exc_info.value.details["description"]


def test_base_url_defaults_from_settings(monkeypatch):
    monkeypatch.setenv("PARTNER_API_BASE_URL", "https://partner.example.com/")

    assert SidebarConfigClient().url == (
        "https://partner.example.com/api/admin/sidebar-config"
    )
