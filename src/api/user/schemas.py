from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.api.core.messages import APIResponse
from src.database.models import SubscriptionType


class CamelModel(BaseModel):
    """Request body with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True
    )


# Field rules live in src.modules.user.validation; these models only shape input.
class UserCreateRequest(CamelModel):
    email: str | None = None
    password: str | None = None
    generate_password: bool = False
    display_name: str | None = None
    company_name: str | None = None
    role: str | None = None
    department: str | None = None
    position: str | None = None
    subscription_type: SubscriptionType | None = None


class BulkUserEntry(CamelModel):
    display_name: str | None = ""
    email: str | None = ""


class BulkUserCreateRequest(CamelModel):
    company_name: str | None = None
    subscription_type: SubscriptionType | None = None
    users: list[BulkUserEntry]


class UserUpdateRequest(CamelModel):
    role: str | None = None
    status: str | None = None
    department: str | None = None
    position: str | None = None
    subscription_type: SubscriptionType | None = None
    display_name: str | None = None
    company_name: str | None = None


class UserListResponse(APIResponse):
    users: list[dict[str, Any]]


class UserDetailResponse(APIResponse):
    user: dict[str, Any]


class UserCreatedResponse(APIResponse):
    uid: str
    password: str | None = None


class BulkUserCreateResponse(APIResponse):
    results: list[dict[str, Any]]
    errors: list[dict[str, Any]]
    summary: dict[str, int]


class OrphanListResponse(APIResponse):
    orphans: list[dict[str, Any]]
