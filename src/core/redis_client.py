"""Shared Redis client factory for the cache-aside helpers."""

import logging

import redis
from django.conf import settings

logger = logging.getLogger(__name__)

_client: redis.Redis | None = None


def get_redis_client() -> redis.Redis:
    """Return a singleton Redis client using REDIS_URL from settings.

    Connection errors are not handled here; they surface on the first command
    and propagate to the caller.
    """

    global _client
    if _client is None:
        _client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)
        logger.info("Redis client created for %s", settings.REDIS_URL)
    return _client


__all__ = ["get_redis_client"]
