"""User management service: registration, updates and deletion.

Creating and deleting an account touches two independent systems (identity
provider and document store) with no shared transaction. Both operations run
as sagas: each step that succeeds has a compensating action, and a
compensation that fails leaves an entry in the orphan registry.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from fastapi import status

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.core.base import BaseService
from src.database.models import (
    UPDATABLE_USER_FIELDS,
    OrphanKind,
    OrphanStage,
    UserStatus,
)
from src.modules.auth.identity import FirebaseIdentityProvider
from src.modules.user.orphans import OrphanRegistry, build_orphan_entry
from src.modules.user.passwords import MIN_PASSWORD_LENGTH, generate_password
from src.modules.user.store import UserStore
from src.modules.user.validation import normalize_user_data, validate_user_data
from src.utils.settings.app import AppSettings


@dataclass
class NewUser:
    email: str | None
    password: str | None = None
    generate_password: bool = False
    display_name: str | None = None
    company_name: str | None = None
    role: str | None = None
    department: str | None = None
    position: str | None = None
    subscription_type: str | None = None


@dataclass
class CreatedUser:
    uid: str
    record: dict[str, Any]
    # Only set when the password was generated; it is not stored anywhere
    password: str | None = None


@dataclass
class BulkRegistrationReport:
    results: list[dict[str, Any]] = field(default_factory=list)
    errors: list[dict[str, Any]] = field(default_factory=list)

    @property
    def summary(self) -> dict[str, int]:
        return {
            "total": len(self.results) + len(self.errors),
            "success": len(self.results),
            "failed": len(self.errors),
        }


def default_display_name(email: str) -> str:
    return email.split("@", 1)[0]


class UserManagementService(BaseService):
    def __init__(
        self,
        identity_provider: FirebaseIdentityProvider,
        store: UserStore,
        orphans: OrphanRegistry,
    ):
        super().__init__()
        self.identity_provider = identity_provider
        self.store = store
        self.orphans = orphans

    # Reads
    async def list_users(self) -> list[dict[str, Any]]:
        return await self.store.list_users()

    async def get_user(self, uid: str) -> dict[str, Any]:
        user = await self.store.get_user(uid)
        if user is None:
            raise AdminConsoleException(
                MessageCode.USER_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"uid": uid},
            )
        return user

    async def list_orphans(self) -> list[dict[str, Any]]:
        return await self.orphans.list_orphans()

    # Registration
    def build_user_record(self, new_user: NewUser) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        email = new_user.email or ""
        record = {
            "email": email,
            "displayName": new_user.display_name or default_display_name(email),
            "companyName": new_user.company_name,
            "role": new_user.role,
            "status": UserStatus.ACTIVE.value,
            "subscriptionType": new_user.subscription_type,
            "createdAt": now,
            "createdBy": None,
            "updatedAt": now,
        }
        if new_user.department is not None:
            record["department"] = new_user.department
        if new_user.position is not None:
            record["position"] = new_user.position
        return normalize_user_data(record)

    def resolve_password(self, new_user: NewUser) -> tuple[str, bool]:
        """Return (password, generated)."""
        if new_user.generate_password:
            return generate_password(AppSettings().PASSWORD_LENGTH), True

        if not new_user.email or not new_user.password:
            raise AdminConsoleException(
                MessageCode.INVALID_INPUT,
                status.HTTP_400_BAD_REQUEST,
                message="Email and password are required",
            )
        if len(new_user.password) < MIN_PASSWORD_LENGTH:
            raise AdminConsoleException(
                MessageCode.INVALID_INPUT,
                status.HTTP_400_BAD_REQUEST,
                message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            )
        return new_user.password, False

    async def _compensate_identity(
        self, uid: str, email: str | None, stage: OrphanStage, reason: str
    ) -> None:
        """Undo identity-account creation; record an orphan if that fails."""
        try:
            await self.identity_provider.delete_account(uid)
        except AdminConsoleException as e:
            await self.orphans.record(
                build_orphan_entry(
                    uid,
                    email,
                    OrphanKind.IDENTITY_WITHOUT_RECORD,
                    stage,
                    f"{reason}; compensation failed: {e.message}",
                )
            )
            raise AdminConsoleException(
                MessageCode.ORPHANED_IDENTITY,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"uid": uid, "email": email, "reason": reason},
            ) from e
        self.logger.info("Rolled back identity account", uid=uid, stage=stage.value)

    async def register_user(self, new_user: NewUser) -> CreatedUser:
        """Create identity account, validate, then persist the user document."""
        if not new_user.email:
            raise AdminConsoleException(
                MessageCode.INVALID_INPUT,
                status.HTTP_400_BAD_REQUEST,
                message="Email and password are required",
            )
        password, generated = self.resolve_password(new_user)

        uid = await self.identity_provider.create_account(
            new_user.email, password, new_user.display_name
        )

        record = self.build_user_record(new_user)
        result = validate_user_data(record)
        if not result.valid:
            self.logger.warning(
                "User record failed validation; rolling back identity",
                uid=uid,
                errors=result.errors,
            )
            await self._compensate_identity(
                uid,
                new_user.email,
                OrphanStage.CREATE_COMPENSATION,
                f"validation failed: {result.summary()}",
            )
            raise AdminConsoleException(
                MessageCode.VALIDATION_FAILED,
                status.HTTP_400_BAD_REQUEST,
                {"errors": result.errors},
                message=f"Validation failed: {result.summary()}",
            )

        try:
            await self.store.create_user(uid, record)
        except AdminConsoleException as e:
            self.logger.error(
                "Persisting user record failed; rolling back identity",
                uid=uid,
                error=e.message,
            )
            await self._compensate_identity(
                uid,
                new_user.email,
                OrphanStage.PERSIST_COMPENSATION,
                f"persist failed: {e.details.get('description', e.message)}",
            )
            raise

        self.logger.info(
            "Registered user",
            uid=uid,
            company_name=record.get("companyName"),
            generated_password=generated,
        )
        return CreatedUser(
            uid=uid, record=record, password=password if generated else None
        )

    async def register_users_bulk(
        self,
        company_name: str | None,
        entries: list[dict[str, str]],
        subscription_type: str | None = None,
    ) -> BulkRegistrationReport:
        """Register each entry independently; failures never abort the batch."""
        if not company_name or not company_name.strip():
            raise AdminConsoleException(
                MessageCode.INVALID_INPUT,
                status.HTTP_400_BAD_REQUEST,
                message="companyName is required",
            )
        if not any(
            (entry.get("displayName") or "").strip()
            and (entry.get("email") or "").strip()
            for entry in entries
        ):
            raise AdminConsoleException(
                MessageCode.INVALID_INPUT,
                status.HTTP_400_BAD_REQUEST,
                message="At least one user with displayName and email is required",
            )

        report = BulkRegistrationReport()
        for entry in entries:
            email = (entry.get("email") or "").strip()
            display_name = (entry.get("displayName") or "").strip()
            new_user = NewUser(
                email=email,
                generate_password=True,
                display_name=display_name or None,
                company_name=company_name,
                department="",
                position="",
                subscription_type=subscription_type,
            )
            try:
                if not email:
                    raise AdminConsoleException(
                        MessageCode.INVALID_EMAIL,
                        status.HTTP_400_BAD_REQUEST,
                        message="Email is required",
                    )
                created = await self.register_user(new_user)
            except AdminConsoleException as e:
                self.logger.warning(
                    "Bulk entry failed", email=email, message_code=e.message_code.value
                )
                report.errors.append(
                    {"email": email, "displayName": display_name, "error": e.message}
                )
                continue

            report.results.append(
                {
                    "uid": created.uid,
                    "email": email,
                    "displayName": created.record["displayName"],
                    "password": created.password,
                }
            )

        self.logger.info(
            "Bulk registration finished", company_name=company_name, **report.summary
        )
        return report

    # Mutation
    async def update_user(self, uid: str, changes: dict[str, Any]) -> dict[str, Any]:
        """Merge only the supplied fields into the user document."""
        existing = await self.get_user(uid)

        update_data = {
            key: value for key, value in changes.items() if key in UPDATABLE_USER_FIELDS
        }
        update_data["updatedAt"] = datetime.now(timezone.utc)

        if AppSettings().VALIDATE_ON_UPDATE:
            merged = normalize_user_data(
                {k: v for k, v in {**existing, **update_data}.items() if k != "uid"}
            )
            result = validate_user_data(merged)
            if not result.valid:
                raise AdminConsoleException(
                    MessageCode.VALIDATION_FAILED,
                    status.HTTP_400_BAD_REQUEST,
                    {"errors": result.errors},
                    message=f"Validation failed: {result.summary()}",
                )

        await self.store.update_user(uid, update_data)
        self.logger.info("Updated user", uid=uid, fields=sorted(update_data))
        return {**existing, **update_data}

    async def delete_user(self, uid: str) -> None:
        """Delete the identity account first, then the user document."""
        existing = await self.get_user(uid)

        identity_existed = await self.identity_provider.delete_account(uid)
        if not identity_existed:
            self.logger.warning("Identity account already gone", uid=uid)

        try:
            await self.store.delete_user(uid)
        except AdminConsoleException as e:
            await self.orphans.record(
                build_orphan_entry(
                    uid,
                    existing.get("email"),
                    OrphanKind.RECORD_WITHOUT_IDENTITY,
                    OrphanStage.DELETE_RECORD,
                    e.details.get("description", e.message),
                )
            )
            raise AdminConsoleException(
                MessageCode.ORPHANED_RECORD,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"uid": uid, "email": existing.get("email")},
            ) from e

        self.logger.info("Deleted user", uid=uid)
