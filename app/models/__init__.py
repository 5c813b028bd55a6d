from app.models.hash_record import HashRecord
from app.models.user_record import UserRecord

__all__ = [
    "HashRecord",
    "UserRecord",
]
