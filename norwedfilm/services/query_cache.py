"""
Redis-backed cache of read results for the public site and the dashboard.

Entries live under ``nf:query:<resource>:<params>``. Every admin mutation
drops the keys of the resources it touched before the response is sent,
so a client that refetches after a write never sees the old data. The TTL
only bounds how long an entry survives if an invalidation is lost.

The cache is best effort: when Redis is unreachable reads miss and writes
are skipped, and the request is served from the database.
"""

import json
import logging
from typing import Any, Iterable, Optional

from redis.exceptions import RedisError

from norwedfilm.core.config import settings

logger = logging.getLogger(__name__)

KEY_PREFIX = "nf:query"


class QueryCache:
    def __init__(self, redis_client, ttl: int = settings.CACHE_TTL_SECONDS):
        self.redis = redis_client
        self.ttl = ttl

    @staticmethod
    def key(resource: str, *params: Any) -> str:
        # Trailing separator keeps "project" from matching "projects" on invalidation.
        return f"{KEY_PREFIX}:{resource}:" + ":".join(
            "" if p is None else str(p) for p in params
        )

    def get(self, key: str) -> Optional[Any]:
        """Cached value, or None on a miss or a Redis error."""
        try:
            raw = self.redis.get(key)
        except RedisError as e:
            logger.warning(f"Cache read failed for {key}: {e}")
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning(f"Discarding undecodable cache entry {key}")
            return None

    def set(self, key: str, value: Any) -> None:
        try:
            self.redis.setex(key, self.ttl, json.dumps(value, default=str))
        except RedisError as e:
            logger.warning(f"Cache write failed for {key}: {e}")

    def invalidate(self, *resources: str) -> None:
        """Drops every cached entry of the given resources."""
        for resource in resources:
            pattern = f"{KEY_PREFIX}:{resource}:*"
            try:
                keys = list(self.redis.scan_iter(match=pattern))
                if keys:
                    self.redis.delete(*keys)
            except RedisError as e:
                logger.warning(f"Cache invalidation failed for {resource}: {e}")
            else:
                logger.debug(f"Invalidated {len(keys)} cache entries for {resource}")

    def remember(self, key: str, loader) -> Any:
        """
        Returns the cached value for ``key``, computing and storing it with
        ``loader()`` on a miss. ``loader`` must return JSON-serialisable data.
        """
        cached = self.get(key)
        if cached is not None:
            return cached
        value = loader()
        self.set(key, value)
        return value


# Resources each admin resource's mutations make stale. Stats are derived
# from most tables and go stale with almost any write.
INVALIDATES = {
    "projects": ("projects", "project", "project-media", "stats"),
    "media": ("project-media", "stats"),
    "pages": ("pages",),
    "contacts": ("stats",),
    "reviews": ("reviews", "cms-landing", "stats"),
    "hero-slides": ("hero-slides", "cms-landing"),
    "blog": ("blog", "blog-comments", "feed"),
    "comments": ("blog-comments",),
    "subscribers": ("stats",),
    "bookings": ("stats",),
    "blocked-dates": (),
    "galleries": (),
    "settings": ("cms-landing", "cms-navigation"),
}


def resources_for(admin_resource: str) -> Iterable[str]:
    return INVALIDATES.get(admin_resource, ())
