"""Console sign-in gate and role-based authorization."""

from fastapi import status

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.core.context import AuthenticatedCallerContext
from src.database.models import ADMINISTRATOR_ROLES, UserStatus
from src.modules.user.store import UserStore
from src.utils.settings.app import AppSettings


def get_allowed_emails() -> list[str]:
    return [
        email.strip().lower() for email in AppSettings().ALLOWED_EMAILS if email.strip()
    ]


def is_email_allowed(email: str | None) -> bool:
    """An empty allowlist admits every authenticated caller."""
    if not email:
        return False
    allowed_emails = get_allowed_emails()
    if not allowed_emails:
        return True
    return email.lower() in allowed_emails


class PermissionService(BaseService):
    def __init__(self, store: UserStore):
        super().__init__()
        self.store = store

    async def load_caller_record(
        self, caller: AuthenticatedCallerContext
    ) -> AuthenticatedCallerContext:
        if caller.record is None:
            caller.record = await self.store.get_user(caller.uid)
        return caller

    def can_administer(self, caller: AuthenticatedCallerContext) -> bool:
        """Callers without a user record are console operators (allowlist only).

        Callers that are themselves tenant users must be active admins.
        """
        if not AppSettings().ENFORCE_ADMIN_ROLE:
            return True
        record = caller.record
        if record is None:
            return True
        return (
            record.get("role") in ADMINISTRATOR_ROLES
            and record.get("status", UserStatus.ACTIVE.value)
            == UserStatus.ACTIVE.value
        )

    async def ensure_can_administer(
        self, caller: AuthenticatedCallerContext
    ) -> AuthenticatedCallerContext:
        caller = await self.load_caller_record(caller)
        if not self.can_administer(caller):
            self.logger.warning(
                "Unauthorized admin access attempt",
                uid=caller.uid,
                role=(caller.record or {}).get("role"),
                status=(caller.record or {}).get("status"),
            )
            raise AdminConsoleException(
                MessageCode.AUTH_INSUFFICIENT_ROLE_PERMISSIONS,
                status.HTTP_403_FORBIDDEN,
                {"description": "Active admin role required"},
            )
        return caller
