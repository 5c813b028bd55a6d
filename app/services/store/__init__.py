"""Document store access"""

from app.services.store.document_store import (
    DocumentStore,
    FirestoreDocumentStore,
    TransactionApply,
)

__all__ = ["DocumentStore", "FirestoreDocumentStore", "TransactionApply"]
