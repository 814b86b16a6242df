"""Firebase identity adapter with the Admin SDK auth calls patched."""

from unittest.mock import MagicMock, patch

import pytest
from firebase_admin import auth, exceptions as firebase_exceptions

from src.api.core.exceptions.base import AdminConsoleException
from src.api.core.messages import MessageCode
from src.modules.auth.identity import FirebaseIdentityProvider
from tests.utils.assertions import assert_admin_console_exception


@pytest.fixture
def firebase_app() -> MagicMock:
    return MagicMock(name="firebase_app")


@pytest.fixture
def provider(firebase_app) -> FirebaseIdentityProvider:
    return FirebaseIdentityProvider(firebase_app)


def test_unconfigured_app_is_rejected():
    with pytest.raises(AdminConsoleException) as exc_info:
        FirebaseIdentityProvider(None)

    assert_admin_console_exception(
        exc_info.value, MessageCode.SERVICE_NOT_CONFIGURED, 500
    )


@pytest.mark.asyncio
async def test_verify_token_returns_identity(provider, firebase_app):
    claims = {"uid": "u1", "email": "a@example.com"}
    with patch.object(auth, "verify_id_token", return_value=claims) as verify:
        identity = await provider.verify_token("token")

    verify.assert_called_once_with("token", firebase_app)
    assert identity.uid == "u1"
    assert identity.email == "a@example.com"
    assert identity.claims == claims


@pytest.mark.asyncio
async def test_rejected_token_is_invalid_token(provider):
    error = auth.InvalidIdTokenError("bad token")
    with patch.object(auth, "verify_id_token", side_effect=error):
        with pytest.raises(AdminConsoleException) as exc_info:
            await provider.verify_token("token")

    assert_admin_console_exception(exc_info.value, MessageCode.INVALID_TOKEN, 401)


@pytest.mark.asyncio
async def test_create_account_returns_uid(provider, firebase_app):
    with patch.object(auth, "create_user", return_value=MagicMock(uid="new-uid")) as create:
        uid = await provider.create_account("a@example.com", "secret123", "A")

    assert uid == "new-uid"
    create.assert_called_once_with(
        email="a@example.com",
        password="secret123",
        display_name="A",
        app=firebase_app,
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, message_code, status_code",
    [
        (auth.EmailAlreadyExistsError("exists", None, None), MessageCode.EMAIL_ALREADY_EXISTS, 500),
        (ValueError("Malformed email address string"), MessageCode.INVALID_EMAIL, 400),
        (firebase_exceptions.UnavailableError("down"), MessageCode.UPSTREAM_FAILURE, 500),
    ],
)
async def test_create_account_errors(provider, error, message_code, status_code):
    with patch.object(auth, "create_user", side_effect=error):
        with pytest.raises(AdminConsoleException) as exc_info:
            await provider.create_account("a@example.com", "secret123")

    assert_admin_console_exception(exc_info.value, message_code, status_code)


@pytest.mark.asyncio
async def test_delete_account(provider):
    with patch.object(auth, "delete_user") as delete:
        assert await provider.delete_account("u1") is True

    assert delete.call_args.args[0] == "u1"


@pytest.mark.asyncio
async def test_delete_missing_account_returns_false(provider):
    with patch.object(auth, "delete_user", side_effect=auth.UserNotFoundError("gone")):
        assert await provider.delete_account("u1") is False


@pytest.mark.asyncio
async def test_delete_failure_is_upstream_failure(provider):
    error = firebase_exceptions.UnavailableError("down")
    with patch.object(auth, "delete_user", side_effect=error):
        with pytest.raises(AdminConsoleException) as exc_info:
            await provider.delete_account("u1")

    assert_admin_console_exception(exc_info.value, MessageCode.UPSTREAM_FAILURE, 500)
