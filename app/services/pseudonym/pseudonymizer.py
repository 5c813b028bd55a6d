"""Keyed one-way hashing of email addresses into storage keys."""

import hashlib


def pseudonym_hash(email: str, secret: str) -> str:
    """Return the SHA-256 hex digest of ``email + secret``.

    The email is hashed exactly as given. Mobile clients compute the same
    digest locally, so normalizing here would break the comparison.
    """
    return hashlib.sha256((email + secret).encode("utf-8")).hexdigest()


class Pseudonymizer:
    """Derives stable pseudonyms for emails under one deployment secret.

    The result is only ever used as a document key, never as a credential.
    """

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("Pseudonymizer requires a non-empty secret")
        self._secret = secret

    def hash_email(self, email: str) -> str:
        return pseudonym_hash(email, self._secret)

    def __repr__(self):
        # Never expose the secret
        return "<Pseudonymizer>"
