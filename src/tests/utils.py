"""Shared helpers for tests (user/article creation, tokens, fake Redis)."""

from __future__ import annotations

from typing import Dict, Optional

from django.contrib.auth import get_user_model

from articles.models import Article
from authentication.services import get_token_service

User = get_user_model()


class FakeRedis:
    """Minimal Redis stub supporting the commands used by CacheService."""

    def __init__(self):
        self._store: Dict[str, str] = {}
        self.ttls: Dict[str, Optional[int]] = {}

    def set(self, key: str, value: str, ex: Optional[int] = None) -> bool:
        """Mimic Redis SET with EX; the TTL is recorded but never elapses."""
        self._store[key] = value
        self.ttls[key] = ex
        return True

    def get(self, key: str):
        """Return stored value for key or None, matching Redis GET semantics."""
        return self._store.get(key)

    def delete(self, *keys: str) -> int:
        """Remove keys and return how many existed, like Redis DEL."""
        removed = 0
        for key in keys:
            if self._store.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed

    def expire(self, key: str) -> None:
        """Simulate the TTL of ``key`` running out."""
        self._store.pop(key, None)
        self.ttls.pop(key, None)


def create_user(email: str, password: str = "StrongPass123", **extra):
    """Create a user with a hashed password for tests."""

    extra.setdefault("first_name", "Test")
    extra.setdefault("last_name", "User")
    return User.objects.create_user(email, password, **extra)


def create_article(owner, title: str = "Title", description: str = "Body", created_at=None) -> Article:
    """Create an article, optionally back-dating its ``created_at``."""

    article = Article.objects.create(title=title, description=description, user=owner)
    if created_at is not None:
        Article.objects.filter(pk=article.pk).update(created_at=created_at)
        article.refresh_from_db()
    return article


def bearer_for(user) -> str:
    """Return an Authorization header value carrying a fresh token for ``user``."""

    return f"Bearer {get_token_service().sign({'id': user.pk})}"
