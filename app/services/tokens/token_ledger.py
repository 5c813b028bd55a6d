"""Consistency-checked crediting of premium tokens."""

import logging
from typing import Optional

from app.models.user_record import UserRecord
from app.services.firebase.firebase_auth import Principal
from app.services.guards import require_owner
from app.services.store import DocumentStore
from app.utils.constants import (
    ADD_TOKENS_FORBIDDEN,
    MISSING_USER_OR_TOKENS,
    NEGATIVE_TOKENS,
    PREMIUM_TOKEN_FIELD,
    USER_NOT_FOUND,
    USERS_COLLECTION,
)
from app.utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class TokenLedger:
    """Credits premium tokens to a user record.

    Increments run inside a store transaction so concurrent credits for
    the same user never lose an update.
    """

    def __init__(self, store: DocumentStore, users_collection: str = USERS_COLLECTION):
        self._store = store
        self._users_collection = users_collection

    async def add_tokens(
        self,
        principal: Principal,
        user_id: Optional[str],
        tokens: Optional[int],
    ) -> int:
        """
        Add ``tokens`` to the caller's premium balance.

        A ``tokens`` value of 0 is rejected as missing, matching what
        existing clients already expect.

        Returns:
            The new premium balance

        Raises:
            ValidationError: If user_id or tokens is missing, or tokens is negative
            AuthorizationError: If user_id is not the caller's uid
            NotFoundError: If the user record does not exist
            StorageError: If the store fails
        """
        if not user_id or not tokens:
            raise ValidationError(MISSING_USER_OR_TOKENS)

        if tokens < 0:
            raise ValidationError(NEGATIVE_TOKENS)

        require_owner(
            principal.uid, user_id, message=ADD_TOKENS_FORBIDDEN, resource="token credit"
        )

        def _increment(current: Optional[dict]) -> dict:
            if current is None:
                raise NotFoundError(USER_NOT_FOUND)
            record = UserRecord.from_document(user_id, current)
            return {PREMIUM_TOKEN_FIELD: record.premium_token + tokens}

        try:
            updates = await self._store.run_transaction(
                self._users_collection, user_id, _increment
            )
        except NotFoundError:
            logger.error(f"Cannot add tokens: user record {user_id} not found")
            raise

        balance = updates[PREMIUM_TOKEN_FIELD]
        logger.info(
            f"Tokens added successfully: uid={user_id} tokens_added={tokens} "
            f"balance={balance} email={principal.email}"
        )
        return balance
