"""Deterministic keyed password digests.

Sign-in looks a user up by email *and* digest in a single query, so the same
plaintext must always produce the same digest for a given secret.
"""

import hashlib
import hmac

from django.conf import settings


class PasswordHasher:
    """HMAC-SHA256 password hasher keyed with an injected secret."""

    def __init__(self, secret: str | None):
        # A missing secret hashes with an empty key instead of failing.
        self._key = (secret or "").encode()

    def hash(self, plaintext: str) -> str:
        """Return the hex digest for ``plaintext``."""
        return hmac.new(self._key, plaintext.encode(), hashlib.sha256).hexdigest()

    def verify(self, plaintext: str, digest: str | None) -> bool:
        """Compare ``plaintext`` against a stored digest in constant time."""
        if not digest:
            return False
        return hmac.compare_digest(self.hash(plaintext), digest)


def get_password_hasher() -> PasswordHasher:
    """Build a hasher from ``settings.PASSWORD_SECRET``."""
    return PasswordHasher(settings.PASSWORD_SECRET)


__all__ = ["PasswordHasher", "get_password_hasher"]
