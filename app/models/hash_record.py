"""HashRecord: pseudonymized snapshot of a deleted account's balance"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class HashRecord:
    """Token balance kept under the pseudonym of a deleted account's email.

    Stored in the hash collection keyed by ``id``. The plain email is kept
    on the document for audit only and is never used as a key.
    """

    id: str
    email: str
    tokens: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> dict:
        return {
            "tokens": self.tokens,
            "email": self.email,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_document(cls, doc_id: str, data: dict) -> "HashRecord":
        return cls(
            id=doc_id,
            email=data.get("email", ""),
            tokens=data.get("tokens") or 0,
            created_at=data.get("createdAt") or datetime.now(timezone.utc),
        )

    def __repr__(self):
        return f"<HashRecord(id={self.id[:8]}..., tokens={self.tokens})>"
