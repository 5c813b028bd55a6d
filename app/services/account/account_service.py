"""Account deletion into pseudonymous snapshots, and their restoration."""

import logging
from typing import Optional

from app.models.hash_record import HashRecord
from app.services.firebase.firebase_auth import Principal
from app.services.guards import require_owner
from app.services.pseudonym import Pseudonymizer
from app.services.store import DocumentStore
from app.utils.constants import (
    DELETE_FORBIDDEN,
    EMAIL_REQUIRED,
    HASH_COLLECTION,
    RESTORE_FORBIDDEN,
    USERS_COLLECTION,
)
from app.utils.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


class AccountEraser:
    """Moves a user's balance under the pseudonym of their email, then
    deletes their identifiable record.

    The steps run in order but not atomically. Each is idempotent, so a
    failed request can simply be retried by the client.
    """

    def __init__(
        self,
        store: DocumentStore,
        pseudonymizer: Pseudonymizer,
        hash_collection: str = HASH_COLLECTION,
        users_collection: str = USERS_COLLECTION,
    ):
        self._store = store
        self._pseudonymizer = pseudonymizer
        self._hash_collection = hash_collection
        self._users_collection = users_collection

    async def delete_account(
        self,
        principal: Principal,
        email: Optional[str],
        tokens: Optional[int] = 0,
        uid: Optional[str] = None,
        client_hash: Optional[str] = None,
    ) -> str:
        """
        Snapshot the balance under a pseudonym and erase the user record.

        Args:
            principal: Verified caller
            email: Email of the account to delete, must be the caller's
            tokens: Balance to keep in the snapshot
            uid: Caller's own user record to delete, if it still exists
            client_hash: Hash computed by the client, compared for diagnostics

        Returns:
            The server-computed email hash (the snapshot key)

        Raises:
            ValidationError: If email is missing
            AuthorizationError: If email or uid is not the caller's
            StorageError: If a store operation fails or the snapshot is not readable
        """
        if not email:
            raise ValidationError(EMAIL_REQUIRED)

        require_owner(
            principal.email, email, message=DELETE_FORBIDDEN, resource="account deletion"
        )
        if uid:
            require_owner(
                principal.uid, uid, message=DELETE_FORBIDDEN, resource="user record deletion"
            )

        logger.info(f"Processing account deletion for uid={principal.uid}")

        server_hash = self._pseudonymizer.hash_email(email)
        logger.info(f"Server hashed email: {server_hash}")

        if client_hash:
            if client_hash == server_hash:
                logger.info("Client hashed email matches server hash")
            else:
                logger.warning(
                    f"Client hashed email {client_hash} does not match server hash {server_hash}"
                )

        record = HashRecord(id=server_hash, email=email, tokens=tokens or 0)
        await self._store.set(self._hash_collection, server_hash, record.to_document())

        stored = await self._store.get(self._hash_collection, server_hash)
        if stored is None:
            logger.error(f"Hash record {server_hash[:8]}... missing after write")
            raise StorageError("Hash record was not persisted")

        if uid:
            await self._store.delete(self._users_collection, uid)
            logger.info(f"Deleted user record {uid}")

        logger.info(
            f"User data for uid={principal.uid} moved to hash record {server_hash[:8]}... "
            f"(tokens={record.tokens})"
        )
        return server_hash


class SnapshotRestorer:
    """Hands a returning user the balance kept from a deleted account."""

    def __init__(
        self,
        store: DocumentStore,
        pseudonymizer: Pseudonymizer,
        hash_collection: str = HASH_COLLECTION,
    ):
        self._store = store
        self._pseudonymizer = pseudonymizer
        self._hash_collection = hash_collection

    async def restore(self, principal: Principal, email: Optional[str]) -> Optional[int]:
        """
        Claim and remove the snapshot stored under the caller's email.

        The read and delete happen in one transaction, so a snapshot is
        handed out at most once.

        Returns:
            The snapshot's token balance, or None if there is no snapshot

        Raises:
            ValidationError: If email is missing
            AuthorizationError: If email or uid is not the caller's
            StorageError: If the store fails
        """
        if not email:
            raise ValidationError(EMAIL_REQUIRED)

        require_owner(
            principal.email, email, message=RESTORE_FORBIDDEN, resource="snapshot restore"
        )

        server_hash = self._pseudonymizer.hash_email(email)
        claimed: dict = {}

        def _claim(current: Optional[dict]) -> None:
            # Firestore may re-run this on contention
            claimed.clear()
            if current is not None:
                claimed.update(current)
            return None

        await self._store.run_transaction(self._hash_collection, server_hash, _claim)

        if not claimed:
            logger.info(f"No hash record to restore for uid={principal.uid}")
            return None

        record = HashRecord.from_document(server_hash, claimed)
        logger.info(
            f"Restored {record.tokens} tokens from hash record {server_hash[:8]}... "
            f"for uid={principal.uid}"
        )
        return record.tokens
