"""Utility modules for the account ledger backend."""

from app.utils.logger import logger, setup_logger
from app.utils.response_utils import error_response
from app.utils.exceptions import (
    ServiceError,
    AuthError,
    MissingCredentialError,
    InvalidCredentialError,
    ValidationError,
    AuthorizationError,
    MethodError,
    NotFoundError,
    StorageError,
)

__all__ = [
    # Logger
    "logger",
    "setup_logger",
    # Response
    "error_response",
    # Errors
    "ServiceError",
    "AuthError",
    "MissingCredentialError",
    "InvalidCredentialError",
    "ValidationError",
    "AuthorizationError",
    "MethodError",
    "NotFoundError",
    "StorageError",
]
