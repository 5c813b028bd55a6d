"""Authorization-by-ownership checks shared by every mutating operation."""

import logging
from typing import Optional

from app.utils.constants import METHOD_NOT_ALLOWED, WRITE_METHOD
from app.utils.exceptions import AuthorizationError, MethodError

logger = logging.getLogger(__name__)


def require_owner(
    authenticated: Optional[str],
    requested: Optional[str],
    *,
    message: str,
    resource: str,
) -> None:
    """
    Ensure the verified identity matches the owner the request targets.

    Args:
        authenticated: Identity value taken from the verified principal
        requested: Owner value claimed by the request body
        message: Client-facing error message on mismatch
        resource: Name of the guarded resource, for the audit log

    Raises:
        AuthorizationError: If the values differ or the principal has none
    """
    if authenticated and authenticated == requested:
        return

    logger.error(
        f"Authorization error on {resource}: "
        f"authenticated={authenticated!r} requested={requested!r}"
    )
    raise AuthorizationError(message)


def require_write_method(method: str) -> None:
    """
    Ensure a mutating endpoint was called with the write method.

    Raises:
        MethodError: If ``method`` is not POST
    """
    if method.upper() != WRITE_METHOD:
        logger.info(f"Rejected {method} request to a write endpoint")
        raise MethodError(METHOD_NOT_ALLOWED)
