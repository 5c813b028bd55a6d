"""Firebase service module for authentication and Firestore access"""

from app.services.firebase.firebase_config import (
    create_firestore_client,
    initialize_firebase,
)
from app.services.firebase.firebase_auth import (
    FirebaseIdentityVerifier,
    IdentityVerifier,
    Principal,
    get_token_from_header,
)

__all__ = [
    "create_firestore_client",
    "initialize_firebase",
    "FirebaseIdentityVerifier",
    "IdentityVerifier",
    "Principal",
    "get_token_from_header",
]
