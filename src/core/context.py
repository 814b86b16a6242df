"""Authentication context model for typed caller authentication."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class AuthenticatedCallerContext:
    """Verified caller: identity-provider uid, email and the presented token."""

    uid: str
    email: str | None
    token: str
    claims: dict[str, Any] = field(default_factory=dict)
    # Caller's own user document, loaded only when authorization needs it
    record: dict[str, Any] | None = None

    def __post_init__(self):
        """Ensure all required fields are present and valid."""
        if not self.uid:
            raise ValueError("uid is required in authentication context")
        if not self.token:
            raise ValueError("token is required in authentication context")

    @property
    def authorization_header(self) -> str:
        return f"Bearer {self.token}"
