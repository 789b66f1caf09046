"""Cache management package.

Session-scoped interning of property records:
- ValueCache: exact-match table for one semantic kind
- CacheManager: one ValueCache per kind, find-or-create front door
- CacheKey: (name, canonical value) pairs
"""

from pset_cache.cache.artifact import (
    ArtifactReference,
    PropertyRecord,
)
from pset_cache.cache.manager import (
    CacheManager,
    close_session,
    open_session,
    session,
)
from pset_cache.cache.state import (
    CacheKey,
    build_cache_key,
)
from pset_cache.cache.value_cache import (
    CacheStats,
    ValueCache,
)


__all__ = [
    "ArtifactReference",
    "CacheKey",
    "CacheManager",
    "CacheStats",
    "PropertyRecord",
    "ValueCache",
    "build_cache_key",
    "close_session",
    "open_session",
    "session",
]
