"""Shared FastAPI dependencies for the account endpoints"""

import logging

from fastapi import Depends, Request

from app.services.context import ServiceContext
from app.services.firebase import Principal, get_token_from_header
from app.services.guards import require_write_method
from app.utils.exceptions import AuthError, MissingCredentialError
from app.utils.sentry_utils import set_user_context

logger = logging.getLogger(__name__)


def get_services(request: Request) -> ServiceContext:
    """Return the ServiceContext built at startup."""
    return request.app.state.services


async def get_principal(
    request: Request, services: ServiceContext = Depends(get_services)
) -> Principal:
    """
    FastAPI dependency yielding the verified caller.

    This dependency:
    1. Extracts the Bearer token from the Authorization header
    2. Verifies it with the identity provider
    3. Logs the outcome; the token itself is never logged

    Raises:
        MissingCredentialError: No Bearer token (401)
        InvalidCredentialError: Token rejected (403)
    """
    try:
        token = get_token_from_header(request.headers.get("Authorization"))
    except MissingCredentialError:
        logger.error(
            f"Authentication error (401): Missing Authorization header "
            f"method={request.method} url={request.url}"
        )
        raise

    try:
        principal = await services.verifier.verify(token)
    except AuthError:
        logger.error(
            f"Authorization error (403): Invalid or expired token "
            f"method={request.method} url={request.url} token_length={len(token)}"
        )
        raise

    logger.info(
        f"Authentication successful uid={principal.uid} email={principal.email} "
        f"method={request.method} url={request.url}"
    )
    set_user_context(principal.uid)
    return principal


async def reject_method(
    request: Request, principal: Principal = Depends(get_principal)
) -> None:
    """Handler for non-POST calls to write endpoints, after authentication."""
    require_write_method(request.method)
