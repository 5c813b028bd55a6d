"""Shared fixtures: in-memory document store, fake identity provider and an HTTP client."""

import asyncio
import copy
from collections import defaultdict

import pytest
from httpx import ASGITransport, AsyncClient

from app.app_factory import create_app
from app.config import Settings
from app.services.context import ServiceContext
from app.services.firebase import Principal
from app.utils.constants import INVALID_TOKEN
from app.utils.exceptions import InvalidCredentialError, StorageError

TEST_SECRET = "test-secret"

OWNER = Principal(uid="u1", email="a@b.com")
OTHER = Principal(uid="u2", email="c@d.com")

OWNER_HEADERS = {"Authorization": "Bearer token-u1"}
OTHER_HEADERS = {"Authorization": "Bearer token-u2"}


class InMemoryDocumentStore:
    """DocumentStore double.

    Transactions are serialized with a lock and yield to the event loop
    between read and write, so concurrent callers really interleave.
    """

    def __init__(self):
        self.collections = defaultdict(dict)
        self.calls = []
        self.failing = set()
        self.drop_writes = False
        self._transaction_lock = asyncio.Lock()

    def _record(self, operation, collection, doc_id):
        self.calls.append((operation, collection, doc_id))
        if operation in self.failing:
            raise StorageError("backend unavailable")

    async def get(self, collection, doc_id):
        self._record("get", collection, doc_id)
        doc = self.collections[collection].get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def set(self, collection, doc_id, data):
        self._record("set", collection, doc_id)
        if not self.drop_writes:
            self.collections[collection][doc_id] = copy.deepcopy(data)

    async def delete(self, collection, doc_id):
        self._record("delete", collection, doc_id)
        self.collections[collection].pop(doc_id, None)

    async def run_transaction(self, collection, doc_id, apply):
        self._record("transaction", collection, doc_id)
        async with self._transaction_lock:
            current = copy.deepcopy(self.collections[collection].get(doc_id))
            await asyncio.sleep(0)
            updates = apply(current)
            if updates is None:
                self.collections[collection].pop(doc_id, None)
                return None
            doc = self.collections[collection][doc_id]
            for path, value in updates.items():
                *parents, leaf = path.split(".")
                target = doc
                for key in parents:
                    target = target.setdefault(key, {})
                target[leaf] = value
            return updates


class FakeIdentityVerifier:
    def __init__(self, principals):
        self.principals = principals
        self.seen = []

    async def verify(self, credential):
        self.seen.append(credential)
        if credential not in self.principals:
            raise InvalidCredentialError(INVALID_TOKEN)
        return self.principals[credential]


@pytest.fixture
def settings():
    return Settings(_env_file=None, env="local", email_hash_secret=TEST_SECRET)


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def verifier():
    return FakeIdentityVerifier({"token-u1": OWNER, "token-u2": OTHER})


@pytest.fixture
def services(settings, verifier, store):
    return ServiceContext(settings=settings, verifier=verifier, store=store)


@pytest.fixture
async def client(services):
    """Async HTTP client wired to the FastAPI app."""
    transport = ASGITransport(app=create_app(services=services))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
