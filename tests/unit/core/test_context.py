import pytest

from src.core.context import AuthenticatedCallerContext


def test_authorization_header_reuses_caller_token():
    caller = AuthenticatedCallerContext(uid="u1", email=None, token="tok")

    assert caller.authorization_header == "Bearer tok"
    assert caller.claims == {}


@pytest.mark.parametrize("uid, token", [("", "tok"), ("u1", "")])
def test_uid_and_token_are_required(uid, token):
    with pytest.raises(ValueError):
        AuthenticatedCallerContext(uid=uid, email=None, token=token)
