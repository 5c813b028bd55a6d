"""Common response schemas"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Client error (4xx)"""
    error: str


class FailureResponse(BaseModel):
    """Server-side failure (5xx)"""
    success: bool = False
    error: str


class MessageResponse(BaseModel):
    """Simple success acknowledgement"""
    success: bool = True
    message: str


ERROR_RESPONSES = {
    400: {
        "model": ErrorResponse,
        "description": (
            "Missing required field, or malformed body. A body that is not valid "
            "JSON is rejected before authentication, so it gets 400 even without credentials."
        ),
    },
    401: {"model": ErrorResponse, "description": "Missing Authorization header"},
    403: {"model": ErrorResponse, "description": "Invalid token or not the account owner"},
    405: {"model": ErrorResponse, "description": "Method not allowed"},
    500: {"model": FailureResponse, "description": "Store failure"},
}
