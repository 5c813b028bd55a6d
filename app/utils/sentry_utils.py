"""Sentry error tracking utilities."""

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from app.config import Settings


def configure_sentry(settings: Settings) -> bool:
    """Initialize Sentry for error tracking.

    Only initializes in deployed environments (staging/production) and
    only when a DSN is configured.

    Args:
        settings: Application settings

    Returns:
        True if Sentry was initialized, False otherwise
    """
    if settings.is_debug or not settings.sentry_dsn:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.env,
        traces_sample_rate=0.2,
        integrations=[FastApiIntegration(transaction_style="endpoint")],
        # Requests carry emails; keep them out of Sentry
        send_default_pii=False,
    )
    return True


def capture_exception(exception: Exception) -> None:
    """Send an exception to Sentry. No-op when Sentry is not initialized."""
    if not sentry_sdk.get_client().is_active():
        return
    sentry_sdk.capture_exception(exception)


def set_user_context(uid: str) -> None:
    """Attach the authenticated uid to subsequent Sentry events."""
    if not sentry_sdk.get_client().is_active():
        return
    sentry_sdk.set_user({"id": uid})
