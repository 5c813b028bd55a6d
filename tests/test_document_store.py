"""Tests for the Firestore-backed document store."""

from unittest.mock import MagicMock, patch

import pytest
from firebase_admin import firestore
from google.api_core.exceptions import ServiceUnavailable

from app.services.store import FirestoreDocumentStore
from app.utils.exceptions import NotFoundError, StorageError


@pytest.fixture
def client():
    return MagicMock(name="firestore_client")


@pytest.fixture
def document(client):
    return client.collection.return_value.document.return_value


@pytest.mark.asyncio
async def test_set_overwrites_document(client, document):
    store = FirestoreDocumentStore(client)

    await store.set("hash", "abc", {"tokens": 3})

    client.collection.assert_called_once_with("hash")
    client.collection.return_value.document.assert_called_once_with("abc")
    document.set.assert_called_once_with({"tokens": 3})


@pytest.mark.asyncio
async def test_get_returns_fields_of_existing_document(client, document):
    document.get.return_value = MagicMock(exists=True, **{"to_dict.return_value": {"tokens": 3}})
    store = FirestoreDocumentStore(client)

    assert await store.get("hash", "abc") == {"tokens": 3}


@pytest.mark.asyncio
async def test_get_returns_none_for_missing_document(client, document):
    document.get.return_value = MagicMock(exists=False)
    store = FirestoreDocumentStore(client)

    assert await store.get("hash", "abc") is None


@pytest.mark.asyncio
async def test_delete_removes_document(client, document):
    store = FirestoreDocumentStore(client)

    await store.delete("users", "u1")

    client.collection.assert_called_once_with("users")
    document.delete.assert_called_once_with()


@pytest.mark.asyncio
async def test_api_errors_become_storage_errors(client, document):
    document.set.side_effect = ServiceUnavailable("firestore is down")
    store = FirestoreDocumentStore(client)

    with pytest.raises(StorageError) as exc_info:
        await store.set("hash", "abc", {"tokens": 3})

    assert "firestore is down" in exc_info.value.message
    assert exc_info.value.status_code == 500


@pytest.fixture
def transaction(client):
    return client.transaction.return_value


@pytest.fixture
def run_inline():
    # Run the transactional function once against the mock transaction
    with patch.object(firestore, "transactional", lambda func: func):
        yield


def snapshot(data):
    if data is None:
        return MagicMock(exists=False)
    return MagicMock(exists=True, **{"to_dict.return_value": data})


@pytest.mark.asyncio
async def test_transaction_writes_dotted_path_updates(client, document, transaction, run_inline):
    document.get.return_value = snapshot({"tokens": {"premiumToken": 100}})
    store = FirestoreDocumentStore(client)

    def increment(current):
        return {"tokens.premiumToken": current["tokens"]["premiumToken"] + 50}

    updates = await store.run_transaction("users", "u1", increment)

    assert updates == {"tokens.premiumToken": 150}
    document.get.assert_called_once_with(transaction=transaction)
    transaction.update.assert_called_once_with(document, {"tokens.premiumToken": 150})
    transaction.delete.assert_not_called()


@pytest.mark.asyncio
async def test_transaction_deletes_when_apply_returns_none(client, document, transaction, run_inline):
    document.get.return_value = snapshot({"tokens": 12, "email": "a@b.com"})
    store = FirestoreDocumentStore(client)
    seen = []

    def claim(current):
        seen.append(current)
        return None

    assert await store.run_transaction("hash", "abc", claim) is None
    assert seen == [{"tokens": 12, "email": "a@b.com"}]
    transaction.delete.assert_called_once_with(document)
    transaction.update.assert_not_called()


@pytest.mark.asyncio
async def test_transaction_on_missing_document_without_updates_writes_nothing(
    client, document, transaction, run_inline
):
    document.get.return_value = snapshot(None)
    store = FirestoreDocumentStore(client)
    seen = []

    def claim(current):
        seen.append(current)
        return None

    assert await store.run_transaction("hash", "abc", claim) is None
    assert seen == [None]
    transaction.delete.assert_not_called()
    transaction.update.assert_not_called()


@pytest.mark.asyncio
async def test_transaction_error_from_apply_propagates_without_write(
    client, document, transaction, run_inline
):
    document.get.return_value = snapshot(None)
    store = FirestoreDocumentStore(client)

    def increment(current):
        raise NotFoundError("User not found")

    with pytest.raises(NotFoundError, match="User not found"):
        await store.run_transaction("users", "u1", increment)

    transaction.update.assert_not_called()
    transaction.delete.assert_not_called()


@pytest.mark.asyncio
async def test_transaction_api_errors_become_storage_errors(client, document, run_inline):
    document.get.side_effect = ServiceUnavailable("firestore is down")
    store = FirestoreDocumentStore(client)

    with pytest.raises(StorageError, match="firestore is down"):
        await store.run_transaction("users", "u1", lambda current: {})


@pytest.mark.asyncio
async def test_transaction_uses_firestore_transactional(client, document):
    document.get.return_value = snapshot({"tokens": {}})
    store = FirestoreDocumentStore(client)
    wrapped = []

    def transactional(func):
        wrapped.append(func)
        return func

    with patch.object(firestore, "transactional", transactional):
        await store.run_transaction("users", "u1", lambda current: {"tokens.premiumToken": 1})

    assert len(wrapped) == 1
