"""Account lifecycle services"""

from app.services.account.account_service import AccountEraser, SnapshotRestorer

__all__ = ["AccountEraser", "SnapshotRestorer"]
