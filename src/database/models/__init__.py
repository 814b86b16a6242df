"""Document models for the admin console."""

from .orphans import OrphanKind, OrphanStage
from .users import (
    ADMINISTRATOR_ROLES,
    ALLOWED_ROLES,
    ALLOWED_STATUSES,
    DEFAULT_USER_VALUES,
    UPDATABLE_USER_FIELDS,
    SubscriptionType,
    UserRole,
    UserStatus,
)

__all__ = [
    # Enums
    "UserRole",
    "UserStatus",
    "SubscriptionType",
    "OrphanKind",
    "OrphanStage",
    # Schema constants
    "ALLOWED_ROLES",
    "ALLOWED_STATUSES",
    "ADMINISTRATOR_ROLES",
    "DEFAULT_USER_VALUES",
    "UPDATABLE_USER_FIELDS",
]
