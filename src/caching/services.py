"""Cache-aside helpers over a Redis-compatible client."""

import logging
from typing import Callable, Optional, Protocol

from django.conf import settings

from core.redis_client import get_redis_client

logger = logging.getLogger(__name__)

DEFAULT_TTL = 3600


class KeyValueClient(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str, ex: Optional[int] = None) -> object: ...

    def delete(self, *keys: str) -> int: ...


class CacheService:
    """Typed get/set/delete over the key-value store with a default expiry.

    Store errors (e.g. ``redis.ConnectionError``) are not caught. A miss is
    reported as ``None``; an expired entry is indistinguishable from a key that
    was never set.
    """

    def __init__(self, client: KeyValueClient, default_ttl: int = DEFAULT_TTL):
        self.client = client
        self.default_ttl = default_ttl

    def set_cache(self, key: str, value: str, ttl: Optional[int] = None) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds, overwriting.

        ``None`` means the default TTL; a TTL of zero or less is rejected.
        """
        if ttl is None:
            ttl = self.default_ttl
        if ttl <= 0:
            raise ValueError(f"Cache TTL must be positive, got {ttl}")
        self.client.set(key, value, ex=ttl)

    def get_cache(self, key: str) -> Optional[str]:
        """Return the live value for ``key`` or None."""
        return self.client.get(key)

    def delete_cache(self, key: str) -> None:
        """Remove ``key``; deleting a missing key is a no-op."""
        self.client.delete(key)

    def get_or_set(self, key: str, loader: Callable[[], str], ttl: Optional[int] = None) -> tuple[str, bool]:
        """Cache-aside read: return ``(value, hit)``.

        On a miss ``loader`` computes the value, which is stored with ``ttl``.
        Concurrent misses on one key each call ``loader`` and the last write
        wins; there is no single-flight locking.
        """
        cached = self.get_cache(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached, True

        logger.debug("Cache miss for %s", key)
        value = loader()
        self.set_cache(key, value, ttl)
        return value, False


def get_cache_service() -> CacheService:
    """Compose a CacheService over the shared Redis client."""
    return CacheService(get_redis_client(), default_ttl=settings.ITEM_CACHE_TTL)


__all__ = ["CacheService", "DEFAULT_TTL", "get_cache_service"]
