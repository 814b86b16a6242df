"""Firebase Authentication adapter.

The Admin SDK auth calls are blocking HTTP round trips, so each one is pushed
to the threadpool to keep the event loop free.
"""

from dataclasses import dataclass, field
from typing import Any

import firebase_admin
from fastapi import status
from fastapi.concurrency import run_in_threadpool
from firebase_admin import auth, exceptions as firebase_exceptions

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class VerifiedIdentity:
    uid: str
    email: str | None
    claims: dict[str, Any] = field(default_factory=dict)


class FirebaseIdentityProvider:
    """Verifies bearer tokens and manages identity accounts."""

    def __init__(self, app: firebase_admin.App | None):
        if app is None:
            raise AdminConsoleException(
                MessageCode.SERVICE_NOT_CONFIGURED,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"description": "Firebase Admin app is not initialized"},
            )
        self.app = app

    async def verify_token(self, token: str) -> VerifiedIdentity:
        try:
            claims = await run_in_threadpool(auth.verify_id_token, token, self.app)
        except (ValueError, firebase_exceptions.FirebaseError) as e:
            logger.info("Token verification failed", error=str(e))
            raise AdminConsoleException(
                MessageCode.INVALID_TOKEN, status.HTTP_401_UNAUTHORIZED
            ) from e

        return VerifiedIdentity(
            uid=claims["uid"], email=claims.get("email"), claims=claims
        )

    async def create_account(
        self, email: str, password: str, display_name: str | None = None
    ) -> str:
        """Create an identity account and return its uid."""
        try:
            user = await run_in_threadpool(
                auth.create_user,
                email=email,
                password=password,
                display_name=display_name or None,
                app=self.app,
            )
        except auth.EmailAlreadyExistsError as e:
            raise AdminConsoleException(
                MessageCode.EMAIL_ALREADY_EXISTS,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"email": email},
            ) from e
        except (ValueError, firebase_exceptions.InvalidArgumentError) as e:
            raise AdminConsoleException(
                MessageCode.INVALID_EMAIL,
                status.HTTP_400_BAD_REQUEST,
                {"email": email, "description": str(e)},
            ) from e
        except firebase_exceptions.FirebaseError as e:
            raise AdminConsoleException(
                MessageCode.UPSTREAM_FAILURE,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"operation": "create_account", "description": str(e)},
            ) from e

        logger.info("Created identity account", uid=user.uid)
        return user.uid

    async def delete_account(self, uid: str) -> bool:
        """Delete an identity account; False when it did not exist."""
        try:
            await run_in_threadpool(auth.delete_user, uid, self.app)
        except auth.UserNotFoundError:
            return False
        except (ValueError, firebase_exceptions.FirebaseError) as e:
            raise AdminConsoleException(
                MessageCode.UPSTREAM_FAILURE,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                {"operation": "delete_account", "uid": uid, "description": str(e)},
            ) from e

        logger.info("Deleted identity account", uid=uid)
        return True
