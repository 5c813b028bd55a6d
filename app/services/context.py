"""Per-process service wiring.

A single ServiceContext is built at startup and handed to request
handlers through ``app.state``; nothing below it keeps module-level state.
"""

import logging

from app.config import Settings
from app.services.account import AccountEraser, SnapshotRestorer
from app.services.firebase import (
    FirebaseIdentityVerifier,
    IdentityVerifier,
    create_firestore_client,
    initialize_firebase,
)
from app.services.pseudonym import Pseudonymizer
from app.services.store import DocumentStore, FirestoreDocumentStore
from app.services.tokens import TokenLedger

logger = logging.getLogger(__name__)


class ServiceContext:
    """Settings, external collaborators and the services built on them."""

    def __init__(self, settings: Settings, verifier: IdentityVerifier, store: DocumentStore):
        self.settings = settings
        self.verifier = verifier
        self.store = store

        self.pseudonymizer = Pseudonymizer(settings.email_hash_secret)
        self.account_eraser = AccountEraser(
            store,
            self.pseudonymizer,
            hash_collection=settings.hash_collection,
            users_collection=settings.users_collection,
        )
        self.snapshot_restorer = SnapshotRestorer(
            store,
            self.pseudonymizer,
            hash_collection=settings.hash_collection,
        )
        self.token_ledger = TokenLedger(store, users_collection=settings.users_collection)


def build_service_context(settings: Settings) -> ServiceContext:
    """Connect to Firebase and wire the production services."""
    firebase_app = initialize_firebase(settings)
    context = ServiceContext(
        settings=settings,
        verifier=FirebaseIdentityVerifier(firebase_app),
        store=FirestoreDocumentStore(create_firestore_client(firebase_app)),
    )
    logger.info(
        f"Service context ready (env={settings.env}, "
        f"collections={settings.hash_collection}/{settings.users_collection})"
    )
    return context
