"""Email pseudonymization"""

from app.services.pseudonym.pseudonymizer import Pseudonymizer, pseudonym_hash

__all__ = ["Pseudonymizer", "pseudonym_hash"]
