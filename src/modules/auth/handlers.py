"""Bearer-token authentication for console requests."""

from fastapi import status

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.core.context import AuthenticatedCallerContext
from src.modules.auth.identity import FirebaseIdentityProvider
from src.modules.auth.permissions import is_email_allowed
from src.utils.logger import bind_caller, get_logger

logger = get_logger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    auth_parts = authorization.split(" ")
    if len(auth_parts) != 2 or auth_parts[0].lower() != "bearer":
        return None
    return auth_parts[1].strip() or None


async def handle_bearer_auth(
    authorization: str | None,
    identity_provider: FirebaseIdentityProvider,
) -> AuthenticatedCallerContext:
    token = extract_bearer_token(authorization)
    if not token:
        logger.debug(
            "Missing or malformed authorization header",
            has_authorization=bool(authorization),
        )
        raise AdminConsoleException(
            MessageCode.AUTH_REQUIRED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Authorization header must be 'Bearer <token>'"},
        )

    identity = await identity_provider.verify_token(token)

    if not is_email_allowed(identity.email):
        logger.warning(
            "Caller email not in console allowlist",
            uid=identity.uid,
            email=identity.email,
        )
        raise AdminConsoleException(
            MessageCode.EMAIL_NOT_ALLOWED,
            status.HTTP_403_FORBIDDEN,
            {"email": identity.email},
        )

    bind_caller(identity.uid)
    return AuthenticatedCallerContext(
        uid=identity.uid,
        email=identity.email,
        token=token,
        claims=identity.claims,
    )
