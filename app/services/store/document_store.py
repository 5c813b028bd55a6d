"""Keyed document store interface and its Firestore implementation."""

import asyncio
import logging
from typing import Any, Callable, Optional, Protocol

from firebase_admin import firestore
from google.api_core.exceptions import GoogleAPICallError, RetryError

from app.utils.exceptions import StorageError

logger = logging.getLogger(__name__)

# Receives the current document (None when absent) and returns the field
# updates to write, or None to delete the document.
TransactionApply = Callable[[Optional[dict]], Optional[dict]]


class DocumentStore(Protocol):
    """Minimal keyed-document operations used by the account services."""

    async def get(self, collection: str, doc_id: str) -> dict | None:
        ...

    async def set(self, collection: str, doc_id: str, data: dict) -> None:
        ...

    async def delete(self, collection: str, doc_id: str) -> None:
        ...

    async def run_transaction(
        self, collection: str, doc_id: str, apply: TransactionApply
    ) -> dict | None:
        ...


class FirestoreDocumentStore:
    """DocumentStore backed by Cloud Firestore.

    The Firestore client is synchronous, so every call runs in a worker
    thread to keep the event loop free. API failures are re-raised as
    StorageError carrying the underlying message.
    """

    def __init__(self, client: Any):
        self._client = client

    def _document(self, collection: str, doc_id: str):
        return self._client.collection(collection).document(doc_id)

    async def _call(self, operation: str, func: Callable, *args) -> Any:
        try:
            return await asyncio.to_thread(func, *args)
        except (GoogleAPICallError, RetryError) as e:
            logger.error(f"Firestore {operation} failed: {e}")
            raise StorageError(str(e)) from e

    async def get(self, collection: str, doc_id: str) -> dict | None:
        """
        Fetch a document.

        Returns:
            The document fields, or None if it does not exist
        """
        snapshot = await self._call("get", self._document(collection, doc_id).get)
        return snapshot.to_dict() if snapshot.exists else None

    async def set(self, collection: str, doc_id: str, data: dict) -> None:
        """Create or fully overwrite a document."""
        await self._call("set", self._document(collection, doc_id).set, data)

    async def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document. Deleting a missing document succeeds."""
        await self._call("delete", self._document(collection, doc_id).delete)

    async def run_transaction(
        self, collection: str, doc_id: str, apply: TransactionApply
    ) -> dict | None:
        """
        Atomically read, transform and write one document.

        Firestore re-runs ``apply`` when the transaction contends with
        another writer, so ``apply`` must have no side effects beyond its
        return value. Exceptions raised by ``apply`` abort the transaction
        without writing.

        Args:
            collection: Collection name
            doc_id: Document key
            apply: Maps the current document to updates (or None to delete)

        Returns:
            The updates that were committed (None if deleted or nothing to do)
        """
        ref = self._document(collection, doc_id)

        @firestore.transactional
        def _apply_in_transaction(transaction):
            snapshot = ref.get(transaction=transaction)
            updates = apply(snapshot.to_dict() if snapshot.exists else None)
            if updates is None:
                if snapshot.exists:
                    transaction.delete(ref)
            else:
                transaction.update(ref, updates)
            return updates

        return await self._call(
            "transaction", _apply_in_transaction, self._client.transaction()
        )
