"""
Shared Redis cache utilities.
"""
import json
import logging
from typing import Any, Optional

from django.conf import settings
from django.core.cache import cache
from django.core.serializers.json import DjangoJSONEncoder
from django.db import transaction

logger = logging.getLogger(__name__)

# Projection kinds
CATEGORY_TREE = 'categories:tree'
CATEGORY_FLAT = 'categories:flat'
LOCATION_LIST = 'locations:all'


class CacheService:
    """Redis cache wrapper with prefix support."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def _key(self, key: str) -> str:
        """Build cache key with prefix."""
        return f"{self.prefix}:{key}" if self.prefix else key

    def get(self, key: str) -> Optional[Any]:
        """Get value from cache."""
        value = cache.get(self._key(key))
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass
        return value

    def set(self, key: str, value: Any, timeout: int = 300) -> None:
        """Set value in cache with timeout (default 5 minutes)."""
        if isinstance(value, (dict, list)):
            value = json.dumps(value, cls=DjangoJSONEncoder)
        cache.set(self._key(key), value, timeout)

    def delete_many(self, keys) -> None:
        """Delete keys from cache."""
        cache.delete_many([self._key(key) for key in keys])


class ProjectionCache:
    """
    Per-user cache of read projections (category tree, flat list, locations).

    The cache is advisory: every failure is logged and treated as a miss, and
    nothing here is ever used to decide uniqueness or deletion safety.
    Keys look like ``<namespace>:cache:<kind>:<user_id>``.
    """

    def __init__(self, namespace: str = None, timeout: int = None):
        namespace = namespace or getattr(settings, 'CACHE_NAMESPACE', 'asset_app')
        self.backend = CacheService(prefix=f"{namespace}:cache")
        self.timeout = timeout

    def _default_timeout(self) -> int:
        if self.timeout is not None:
            return self.timeout
        return getattr(settings, 'PROJECTION_CACHE_TIMEOUT', 15 * 60)

    @staticmethod
    def _key(user_id, kind: str) -> str:
        return f"{kind}:{user_id}"

    def key_for(self, user_id, kind: str) -> str:
        """Full backend key for a projection."""
        return self.backend._key(self._key(user_id, kind))

    def get(self, user_id, kind: str) -> Optional[Any]:
        """Return a stored projection, or None on miss."""
        try:
            return self.backend.get(self._key(user_id, kind))
        except Exception:
            logger.warning(f"Cache read failed for {kind} (user {user_id})", exc_info=True)
            return None

    def put(self, user_id, kind: str, value: Any, timeout: int = None) -> None:
        """Store a projection. Never raises."""
        if timeout is None:
            timeout = self._default_timeout()
        try:
            self.backend.set(self._key(user_id, kind), value, timeout)
        except Exception:
            logger.warning(f"Cache write failed for {kind} (user {user_id})", exc_info=True)

    def invalidate(self, user_id, *kinds: str) -> None:
        """Drop projections for a user. Never raises."""
        if not kinds:
            return
        try:
            self.backend.delete_many([self._key(user_id, kind) for kind in kinds])
            logger.debug(f"Invalidated {', '.join(kinds)} for user {user_id}")
        except Exception:
            logger.warning(f"Cache invalidation failed for user {user_id}", exc_info=True)

    def invalidate_on_commit(self, user_id, *kinds: str) -> None:
        """
        Drop projections after the surrounding transaction commits.
        Runs immediately outside a transaction; nothing is dropped on rollback.
        """
        transaction.on_commit(lambda: self.invalidate(user_id, *kinds))


# Pre-configured cache instance
projection_cache = ProjectionCache()
