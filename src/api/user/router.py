"""Tenant user administration endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from src.api.core.dependencies import (
    AdminCallerDep,
    CurrentCallerDep,
    UserManagementServiceDep,
)
from src.api.core.messages import APIResponse, MessageCode
from src.api.user.schemas import (
    BulkUserCreateRequest,
    BulkUserCreateResponse,
    OrphanListResponse,
    UserCreatedResponse,
    UserCreateRequest,
    UserDetailResponse,
    UserListResponse,
    UserUpdateRequest,
)
from src.modules.user.management import NewUser


router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
async def list_users(
    caller: CurrentCallerDep,
    user_service: UserManagementServiceDep,
) -> UserListResponse:
    """List every tenant user document."""
    users = await user_service.list_users()
    return UserListResponse.success_response(users=users)


@router.post(
    "",
    response_model=UserCreatedResponse | BulkUserCreateResponse,
    response_model_exclude_none=True,
)
async def create_users(
    payload: Annotated[dict[str, Any], Body()],
    caller: AdminCallerDep,
    user_service: UserManagementServiceDep,
) -> UserCreatedResponse | BulkUserCreateResponse:
    """Create one user, or many when the body carries a ``users`` list."""
    if "users" in payload:
        bulk = BulkUserCreateRequest.model_validate(payload)
        report = await user_service.register_users_bulk(
            company_name=bulk.company_name,
            entries=[entry.model_dump(by_alias=True) for entry in bulk.users],
            subscription_type=bulk.subscription_type,
        )
        return BulkUserCreateResponse.success_response(
            message_code=(
                MessageCode.BULK_PARTIAL if report.errors else MessageCode.BULK_COMPLETED
            ),
            results=report.results,
            errors=report.errors,
            summary=report.summary,
        )

    request_data = UserCreateRequest.model_validate(payload)
    created = await user_service.register_user(
        NewUser(
            email=request_data.email,
            password=request_data.password,
            generate_password=request_data.generate_password,
            display_name=request_data.display_name,
            company_name=request_data.company_name,
            role=request_data.role,
            department=request_data.department,
            position=request_data.position,
            subscription_type=request_data.subscription_type,
        )
    )
    return UserCreatedResponse.success_response(
        message_code=MessageCode.USER_CREATED,
        uid=created.uid,
        password=created.password,
    )


# Declared before /{user_id} so "orphans" is not taken as an id
@router.get("/orphans", response_model=OrphanListResponse)
async def list_orphans(
    caller: CurrentCallerDep,
    user_service: UserManagementServiceDep,
) -> OrphanListResponse:
    """List identity/record pairs left inconsistent by failed compensations."""
    orphans = await user_service.list_orphans()
    return OrphanListResponse.success_response(orphans=orphans)


@router.get("/{user_id}", response_model=UserDetailResponse)
async def get_user(
    user_id: str,
    caller: CurrentCallerDep,
    user_service: UserManagementServiceDep,
) -> UserDetailResponse:
    user = await user_service.get_user(user_id)
    return UserDetailResponse.success_response(user=user)


@router.put("/{user_id}", response_model=APIResponse)
async def update_user(
    user_id: str,
    request_data: UserUpdateRequest,
    caller: AdminCallerDep,
    user_service: UserManagementServiceDep,
) -> APIResponse:
    """Merge only the supplied fields into the user document."""
    await user_service.update_user(
        user_id, request_data.model_dump(by_alias=True, exclude_unset=True)
    )
    return APIResponse.success_response(message_code=MessageCode.USER_UPDATED)


@router.delete("/{user_id}", response_model=APIResponse)
async def delete_user(
    user_id: str,
    caller: AdminCallerDep,
    user_service: UserManagementServiceDep,
) -> APIResponse:
    """Delete the identity account and then the user document."""
    await user_service.delete_user(user_id)
    return APIResponse.success_response(message_code=MessageCode.USER_DELETED)
