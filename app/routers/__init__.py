"""API routers module"""

from app.routers.accounts import router as accounts_router
from app.routers.tokens import router as tokens_router

__all__ = [
    "accounts_router",
    "tokens_router",
]
