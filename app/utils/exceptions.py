"""Service error taxonomy.

Each error carries the HTTP status it is rendered with by the exception
handler registered in ``app.app_factory``.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors raised by the account services."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthError(ServiceError):
    """Credential missing or rejected by the identity provider."""


class MissingCredentialError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentialError(AuthError):
    status_code = status.HTTP_403_FORBIDDEN


class ValidationError(ServiceError):
    """A required request field is missing or unusable."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthorizationError(ServiceError):
    """Authenticated principal does not own the requested resource."""

    status_code = status.HTTP_403_FORBIDDEN


class MethodError(ServiceError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED


class NotFoundError(ServiceError):
    """Target record is absent. Rendered as a server error."""


class StorageError(ServiceError):
    """The document store failed or did not persist a write."""
