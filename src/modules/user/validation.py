"""User document validation and normalization.

``validate_user_data`` is the single definition of a well-formed user record.
Request models and handlers do not repeat these rules; they
normalize, then validate here.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from src.database.models import ALLOWED_ROLES, ALLOWED_STATUSES, DEFAULT_USER_VALUES


@dataclass
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)

    def summary(self) -> str:
        return "; ".join(self.errors)


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_user_data(data: dict[str, Any]) -> ValidationResult:
    """Check every schema rule and collect all failures."""
    errors: list[str] = []

    email = data.get("email")
    if not isinstance(email, str) or "@" not in email:
        errors.append("email must be a valid email address")

    if _is_blank(data.get("displayName")):
        errors.append("displayName is required")

    if _is_blank(data.get("companyName")):
        errors.append("companyName is required")

    if data.get("role") not in ALLOWED_ROLES:
        errors.append('role must be one of "admin", "manager", "user"')

    if data.get("status") not in ALLOWED_STATUSES:
        errors.append('status must be one of "active", "inactive", "suspended"')

    if not isinstance(data.get("createdAt"), datetime):
        errors.append("createdAt must be a timestamp")

    # Optional fields are type-checked only when present
    if "department" in data and not isinstance(data["department"], str):
        errors.append("department must be a string")

    if "position" in data and not isinstance(data["position"], str):
        errors.append("position must be a string")

    if (
        "createdBy" in data
        and data["createdBy"] is not None
        and not isinstance(data["createdBy"], str)
    ):
        errors.append("createdBy must be a string or null")

    return ValidationResult(valid=not errors, errors=errors)


def normalize_user_data(data: dict[str, Any]) -> dict[str, Any]:
    """Fill schema defaults on legacy or partial user data.

    Only absent (or empty, for role/status) fields are touched; every other
    key is carried over unchanged.
    """
    normalized = dict(data)

    if not normalized.get("role"):
        normalized["role"] = DEFAULT_USER_VALUES["role"]

    if not normalized.get("status"):
        normalized["status"] = DEFAULT_USER_VALUES["status"]

    for key in ("department", "position", "createdBy"):
        if key not in normalized:
            normalized[key] = DEFAULT_USER_VALUES[key]

    # Older documents carry lastUpdated instead of updatedAt
    last_updated = data.get("lastUpdated")
    if not normalized.get("updatedAt") and isinstance(last_updated, datetime):
        normalized["updatedAt"] = last_updated

    return normalized
