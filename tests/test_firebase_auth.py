"""Tests for Firebase ID token verification."""

from unittest.mock import MagicMock, patch

import pytest
from firebase_admin import auth

from app.services.firebase import FirebaseIdentityVerifier, Principal, get_token_from_header
from app.utils.exceptions import InvalidCredentialError, MissingCredentialError


@pytest.fixture
def firebase_app():
    return MagicMock(name="firebase_app")


@pytest.mark.asyncio
async def test_verify_returns_principal(firebase_app):
    verifier = FirebaseIdentityVerifier(firebase_app)

    with patch.object(
        auth, "verify_id_token", return_value={"uid": "u1", "email": "a@b.com"}
    ) as verify_id_token:
        principal = await verifier.verify("id-token")

    assert principal == Principal(uid="u1", email="a@b.com")
    verify_id_token.assert_called_once_with("id-token", app=firebase_app)


@pytest.mark.asyncio
async def test_verify_allows_tokens_without_email(firebase_app):
    verifier = FirebaseIdentityVerifier(firebase_app)

    with patch.object(auth, "verify_id_token", return_value={"uid": "u1"}):
        principal = await verifier.verify("id-token")

    assert principal.email is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        auth.ExpiredIdTokenError("Token expired", cause=None),
        auth.RevokedIdTokenError("Token revoked"),
        auth.InvalidIdTokenError("Bad signature"),
        ValueError("Illegal ID token provided"),
    ],
)
async def test_rejected_tokens_raise_invalid_credential(firebase_app, error):
    verifier = FirebaseIdentityVerifier(firebase_app)

    with patch.object(auth, "verify_id_token", side_effect=error):
        with pytest.raises(InvalidCredentialError) as exc_info:
            await verifier.verify("id-token")

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Invalid or expired token"


def test_bearer_token_is_extracted():
    assert get_token_from_header("Bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.parametrize("header", [None, "", "Basic dXNlcjpwYXNz", "bearer abc", "Token abc"])
def test_missing_bearer_header_raises(header):
    with pytest.raises(MissingCredentialError) as exc_info:
        get_token_from_header(header)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Missing Authorization header"
