"""Pydantic schemas for request/response validation"""

from app.schemas.common import (
    ERROR_RESPONSES,
    ErrorResponse,
    FailureResponse,
    MessageResponse,
)
from app.schemas.account import (
    DeleteAccountRequest,
    DeleteAccountResponse,
    RestoreTokensRequest,
    RestoreTokensResponse,
)
from app.schemas.tokens import AddTokensRequest

__all__ = [
    "ERROR_RESPONSES",
    "ErrorResponse",
    "FailureResponse",
    "MessageResponse",
    "DeleteAccountRequest",
    "DeleteAccountResponse",
    "RestoreTokensRequest",
    "RestoreTokensResponse",
    "AddTokensRequest",
]
