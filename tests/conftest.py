"""Global test configuration and fixtures for the admin console API."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.core.dependencies import (
    get_identity_provider,
    get_orphan_registry,
    get_sidebar_version_store,
    get_user_store,
)
from src.modules.sidebar.client import get_sidebar_client
from src.modules.user.management import UserManagementService
from tests.factories import UserDocumentFactory
from tests.fakes import (
    FakeIdentityProvider,
    FakePartnerClient,
    InMemoryOrphanRegistry,
    InMemorySidebarVersionStore,
    InMemoryUserStore,
)

BASE_URL = "http://test-admin-console-api"

OPERATOR_TOKEN = "operator-token"
OPERATOR_UID = "operator-uid"
OPERATOR_EMAIL = "operator@example.com"

ADMIN_TOKEN = "admin-token"
ADMIN_UID = "admin-uid"
ADMIN_EMAIL = "admin@example.com"

MEMBER_TOKEN = "member-token"
MEMBER_UID = "member-uid"
MEMBER_EMAIL = "member@example.com"


@pytest.fixture(autouse=True)
def console_environment(monkeypatch):
    """Isolate settings from any local .env and Firebase credentials."""
    monkeypatch.setenv("ENVIRONMENT", "TEST")
    monkeypatch.setenv("FIREBASE_ADMIN_SDK_KEY", "")
    monkeypatch.setenv("ALLOWED_EMAILS", "[]")
    monkeypatch.setenv("ENFORCE_ADMIN_ROLE", "true")
    monkeypatch.setenv("VALIDATE_ON_UPDATE", "false")
    monkeypatch.setenv("SIDEBAR_ALLOW_UNVERSIONED_WRITES", "true")


@pytest.fixture
def user_document_factory():
    return UserDocumentFactory


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    provider = FakeIdentityProvider()
    provider.add_token(OPERATOR_TOKEN, OPERATOR_UID, OPERATOR_EMAIL)
    provider.add_token(ADMIN_TOKEN, ADMIN_UID, ADMIN_EMAIL)
    provider.add_token(MEMBER_TOKEN, MEMBER_UID, MEMBER_EMAIL)
    return provider


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def orphan_registry() -> InMemoryOrphanRegistry:
    return InMemoryOrphanRegistry()


@pytest.fixture
def sidebar_versions() -> InMemorySidebarVersionStore:
    return InMemorySidebarVersionStore()


@pytest.fixture
def partner_client() -> FakePartnerClient:
    return FakePartnerClient()


@pytest.fixture
def user_service(identity_provider, user_store, orphan_registry):
    return UserManagementService(identity_provider, user_store, orphan_registry)


@pytest_asyncio.fixture
async def admin_record(user_store, user_document_factory) -> dict:
    """Caller record holding the admin role."""
    return await user_document_factory.create_in_store(
        user_store, uid=ADMIN_UID, email=ADMIN_EMAIL, role="admin"
    )


@pytest_asyncio.fixture
async def member_record(user_store, user_document_factory) -> dict:
    """Caller record holding the plain user role."""
    return await user_document_factory.create_in_store(
        user_store, uid=MEMBER_UID, email=MEMBER_EMAIL, role="user"
    )


@pytest_asyncio.fixture
async def app(
    identity_provider,
    user_store,
    orphan_registry,
    sidebar_versions,
    partner_client,
) -> AsyncGenerator[FastAPI, None]:
    """Create FastAPI application with lifespan manager and in-memory backends."""
    from src.main import app

    app.dependency_overrides[get_identity_provider] = lambda: identity_provider
    app.dependency_overrides[get_user_store] = lambda: user_store
    app.dependency_overrides[get_orphan_registry] = lambda: orphan_registry
    app.dependency_overrides[get_sidebar_version_store] = lambda: sidebar_versions
    app.dependency_overrides[get_sidebar_client] = lambda: partner_client

    async with LifespanManager(app):
        yield app

    app.dependency_overrides.clear()


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=BASE_URL,
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def operator_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Client for a console operator that has no tenant user record."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=BASE_URL,
        headers={"Authorization": f"Bearer {OPERATOR_TOKEN}"},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_client(
    app: FastAPI, admin_record: dict
) -> AsyncGenerator[AsyncClient, None]:
    """Client for a tenant user holding the admin role."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=BASE_URL,
        headers={"Authorization": f"Bearer {ADMIN_TOKEN}"},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def member_client(
    app: FastAPI, member_record: dict
) -> AsyncGenerator[AsyncClient, None]:
    """Client for a tenant user without the admin role."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=BASE_URL,
        headers={"Authorization": f"Bearer {MEMBER_TOKEN}"},
    ) as ac:
        yield ac
