"""Firebase ID token verification"""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Optional, Protocol

import firebase_admin
from firebase_admin import auth

from app.utils.constants import INVALID_TOKEN, MISSING_AUTH_HEADER
from app.utils.exceptions import InvalidCredentialError, MissingCredentialError

logger = logging.getLogger(__name__)

BEARER_PATTERN = re.compile(r"^Bearer (.*)$")


@dataclass(frozen=True)
class Principal:
    """Verified identity of the caller for a single request"""

    uid: str
    email: Optional[str] = None


class IdentityVerifier(Protocol):
    async def verify(self, credential: str) -> Principal:
        ...


class FirebaseIdentityVerifier:
    """Verifies Firebase ID tokens issued to the mobile app."""

    def __init__(self, firebase_app: firebase_admin.App):
        self._firebase_app = firebase_app

    async def verify(self, credential: str) -> Principal:
        """
        Verify a Firebase ID token.

        The SDK call may fetch signing certificates, so it runs in a
        worker thread.

        Args:
            credential: The raw ID token

        Returns:
            Principal: uid and email from the decoded token

        Raises:
            InvalidCredentialError: If the token is malformed, expired,
                revoked or otherwise rejected
        """
        try:
            decoded_token = await asyncio.to_thread(
                auth.verify_id_token, credential, app=self._firebase_app
            )
        except auth.ExpiredIdTokenError:
            logger.info("Rejected expired ID token")
            raise InvalidCredentialError(INVALID_TOKEN)
        except auth.RevokedIdTokenError:
            logger.info("Rejected revoked ID token")
            raise InvalidCredentialError(INVALID_TOKEN)
        except auth.InvalidIdTokenError as e:
            logger.info(f"Rejected invalid ID token: {e.__class__.__name__}")
            raise InvalidCredentialError(INVALID_TOKEN)
        except Exception as e:
            logger.error(f"Token verification failed: {e.__class__.__name__}")
            raise InvalidCredentialError(INVALID_TOKEN) from e

        return Principal(uid=decoded_token["uid"], email=decoded_token.get("email"))


def get_token_from_header(authorization: Optional[str]) -> str:
    """
    Extract the Bearer token from an Authorization header value.

    Raises:
        MissingCredentialError: If the header is absent or not a Bearer header
    """
    match = BEARER_PATTERN.match(authorization or "")
    if not match:
        raise MissingCredentialError(MISSING_AUTH_HEADER)
    return match.group(1)
