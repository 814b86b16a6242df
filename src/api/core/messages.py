"""Centralized message codes and default messages for API responses."""

from enum import Enum

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"
    USER_CREATED = "USER_CREATED"
    USER_UPDATED = "USER_UPDATED"
    USER_DELETED = "USER_DELETED"
    BULK_COMPLETED = "BULK_COMPLETED"
    BULK_PARTIAL = "BULK_PARTIAL"

    # Authentication & Authorization
    AUTH_REQUIRED = "AUTH_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    EMAIL_NOT_ALLOWED = "EMAIL_NOT_ALLOWED"
    AUTH_INSUFFICIENT_ROLE_PERMISSIONS = "AUTH_INSUFFICIENT_ROLE_PERMISSIONS"

    # User management
    USER_NOT_FOUND = "USER_NOT_FOUND"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    INVALID_EMAIL = "INVALID_EMAIL"
    ORPHANED_IDENTITY = "ORPHANED_IDENTITY"
    ORPHANED_RECORD = "ORPHANED_RECORD"

    # Sidebar configuration
    STALE_VERSION = "STALE_VERSION"
    VERSION_REQUIRED = "VERSION_REQUIRED"

    # Validation errors
    INVALID_INPUT = "INVALID_INPUT"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # Service Errors
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"
    SERVICE_NOT_CONFIGURED = "SERVICE_NOT_CONFIGURED"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    MessageCode.USER_CREATED: "User created successfully",
    MessageCode.USER_UPDATED: "User updated successfully",
    MessageCode.USER_DELETED: "User deleted successfully",
    MessageCode.BULK_COMPLETED: "All users registered successfully",
    MessageCode.BULK_PARTIAL: "Some users could not be registered",
    # Authentication & Authorization
    MessageCode.AUTH_REQUIRED: "Authorization token is required",
    MessageCode.INVALID_TOKEN: "Invalid or expired token",
    MessageCode.EMAIL_NOT_ALLOWED: "This account is not allowed to use the console",
    MessageCode.AUTH_INSUFFICIENT_ROLE_PERMISSIONS: "Admin role required",
    # User management
    MessageCode.USER_NOT_FOUND: "User not found",
    MessageCode.EMAIL_ALREADY_EXISTS: "This email address is already in use",
    MessageCode.INVALID_EMAIL: "The email address is malformed",
    MessageCode.ORPHANED_IDENTITY: "Identity account left without a user record",
    MessageCode.ORPHANED_RECORD: "User record left without an identity account",
    # Sidebar configuration
    MessageCode.STALE_VERSION: "Sidebar configuration was changed by someone else; reload and retry",
    MessageCode.VERSION_REQUIRED: "The sidebar configuration version you read is required",
    # Validation errors
    MessageCode.INVALID_INPUT: "Invalid input provided",
    MessageCode.VALIDATION_FAILED: "User record failed validation",
    MessageCode.PAYLOAD_TOO_LARGE: "Request body too large",
    # Service Errors
    MessageCode.UPSTREAM_FAILURE: "Upstream service error",
    MessageCode.SERVICE_NOT_CONFIGURED: "Backing service is not configured",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.NOT_FOUND: "Resource not found",
}


class APIResponse(BaseModel):
    """Base success envelope shared by every JSON endpoint."""

    success: bool = True
    message_code: MessageCode = MessageCode.SUCCESS
    message: str = DEFAULT_MESSAGES[MessageCode.SUCCESS]

    @classmethod
    def success_response(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        **fields,
    ):
        """Create a success response."""
        return cls(
            success=True,
            message_code=message_code,
            message=message or get_default_message(message_code),
            **fields,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
