"""UserRecord: live account document holding token balances"""

from dataclasses import dataclass, field


@dataclass
class UserRecord:
    """Identifiable account record in the users collection.

    Only ``tokens.premiumToken`` is interpreted here; other balances in
    ``tokens`` and other document fields are left untouched.
    """

    uid: str
    tokens: dict = field(default_factory=dict)

    @property
    def premium_token(self) -> int:
        return self.tokens.get("premiumToken") or 0

    @classmethod
    def from_document(cls, uid: str, data: dict) -> "UserRecord":
        return cls(uid=uid, tokens=dict(data.get("tokens") or {}))

    def __repr__(self):
        return f"<UserRecord(uid='{self.uid}', premium_token={self.premium_token})>"
