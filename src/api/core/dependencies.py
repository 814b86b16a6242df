from typing import Annotated

from fastapi import Depends, Header, Request, status
from google.cloud.firestore import AsyncClient

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.core.context import AuthenticatedCallerContext
from src.modules.auth.handlers import extract_bearer_token, handle_bearer_auth
from src.modules.auth.identity import FirebaseIdentityProvider
from src.modules.auth.permissions import PermissionService
from src.modules.sidebar.client import SidebarConfigClient, get_sidebar_client
from src.modules.sidebar.service import SidebarConfigService
from src.modules.sidebar.versions import SidebarVersionStore
from src.modules.user.management import UserManagementService
from src.modules.user.orphans import OrphanRegistry
from src.modules.user.store import UserStore


async def get_firestore(request: Request) -> AsyncClient:
    """Get the async Firestore client from app state."""
    db = getattr(request.app.state, "firestore", None)
    if db is None:
        raise AdminConsoleException(
            MessageCode.SERVICE_NOT_CONFIGURED,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"description": "Firestore client is not initialized"},
        )
    return db


async def get_identity_provider(request: Request) -> FirebaseIdentityProvider:
    """Get identity provider bound to the Firebase app in app state."""
    return FirebaseIdentityProvider(getattr(request.app.state, "firebase_app", None))


async def get_user_store(
    db: Annotated[AsyncClient, Depends(get_firestore)],
) -> UserStore:
    return UserStore(db)


async def get_orphan_registry(
    db: Annotated[AsyncClient, Depends(get_firestore)],
) -> OrphanRegistry:
    return OrphanRegistry(db)


async def get_sidebar_version_store(
    db: Annotated[AsyncClient, Depends(get_firestore)],
) -> SidebarVersionStore:
    return SidebarVersionStore(db)


FirestoreDep = Annotated[AsyncClient, Depends(get_firestore)]
IdentityProviderDep = Annotated[
    FirebaseIdentityProvider, Depends(get_identity_provider)
]
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
OrphanRegistryDep = Annotated[OrphanRegistry, Depends(get_orphan_registry)]
SidebarVersionStoreDep = Annotated[
    SidebarVersionStore, Depends(get_sidebar_version_store)
]
SidebarClientDep = Annotated[SidebarConfigClient, Depends(get_sidebar_client)]


async def get_user_management_service(
    identity_provider: IdentityProviderDep,
    store: UserStoreDep,
    orphans: OrphanRegistryDep,
) -> UserManagementService:
    """Get user management service wired to identity provider and store."""
    return UserManagementService(identity_provider, store, orphans)


async def get_permission_service(store: UserStoreDep) -> PermissionService:
    """Get permission service with the user store."""
    return PermissionService(store)


async def get_sidebar_config_service(
    client: SidebarClientDep,
    versions: SidebarVersionStoreDep,
) -> SidebarConfigService:
    """Get sidebar configuration service."""
    return SidebarConfigService(client, versions)


UserManagementServiceDep = Annotated[
    UserManagementService, Depends(get_user_management_service)
]
PermissionServiceDep = Annotated[PermissionService, Depends(get_permission_service)]
SidebarConfigServiceDep = Annotated[
    SidebarConfigService, Depends(get_sidebar_config_service)
]


async def get_current_caller(
    identity_provider: IdentityProviderDep,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedCallerContext:
    """Verify the bearer token and apply the console allowlist."""
    return await handle_bearer_auth(authorization, identity_provider)


CurrentCallerDep = Annotated[
    AuthenticatedCallerContext, Depends(get_current_caller)
]


async def get_admin_caller(
    caller: CurrentCallerDep,
    permissions: PermissionServiceDep,
) -> AuthenticatedCallerContext:
    """Authenticated caller that is allowed to mutate console state."""
    return await permissions.ensure_can_administer(caller)


async def get_optional_authorization(
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    """Pass-through Authorization header, only when it is a Bearer one."""
    if extract_bearer_token(authorization) is None:
        return None
    return authorization


AdminCallerDep = Annotated[AuthenticatedCallerContext, Depends(get_admin_caller)]
OptionalAuthorizationDep = Annotated[
    str | None, Depends(get_optional_authorization)
]
