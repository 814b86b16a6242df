"""User document enums and schema defaults."""

from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class SubscriptionType(str, Enum):
    TRIAL = "trial"
    CONTRACT = "contract"


ALLOWED_ROLES = frozenset(role.value for role in UserRole)
ALLOWED_STATUSES = frozenset(status.value for status in UserStatus)

# Fields a partial update may touch
UPDATABLE_USER_FIELDS = (
    "role",
    "status",
    "department",
    "position",
    "subscriptionType",
    "displayName",
    "companyName",
)

DEFAULT_USER_VALUES: dict[str, str | None] = {
    "role": UserRole.USER.value,
    "status": UserStatus.ACTIVE.value,
    "department": "",
    "position": "",
    "createdBy": None,
}

# Roles allowed to administer other accounts
ADMINISTRATOR_ROLES = frozenset({UserRole.ADMIN.value})
