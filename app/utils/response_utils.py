"""Standardized response utilities."""

from fastapi import status
from fastapi.responses import JSONResponse


def error_response(
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> JSONResponse:
    """Create an error response.

    Client errors carry only ``error``; server errors also carry
    ``success: false`` so callers of the mutating endpoints can branch on it.

    Args:
        message: Human-readable error message
        status_code: HTTP status code

    Returns:
        JSONResponse with error structure
    """
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        content = {"success": False, "error": message}
    else:
        content = {"error": message}

    return JSONResponse(status_code=status_code, content=content)
