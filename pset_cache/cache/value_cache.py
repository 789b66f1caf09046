"""ValueCache - exact-match interning table for one semantic kind.

Entries live for the whole generation session: there is no eviction and
no size bound. Bounding the number of buckets is the job of the
quantization policies, which only admit a few hundred canonical values
per kind.

Not thread-safe. A session, and therefore its caches, is owned by a
single thread.
"""

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from pset_cache.core.exceptions import ConsistencyFault
from pset_cache.core.logging import get_logger


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = get_logger(__name__)


@dataclass
class CacheStats:
    """Counters for one ValueCache.

    Attributes:
        hits: Lookups answered from the cache
        misses: Lookups that found nothing
        inserts: Entries added
        bypasses: Requests that were not cacheable and skipped the cache
    """

    hits: int = 0
    misses: int = 0
    inserts: int = 0
    bypasses: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups answered from the cache (0.0 when unused)."""
        if not self.lookups:
            return 0.0
        return self.hits / self.lookups

    def to_dict(self) -> dict[str, int | float]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "inserts": self.inserts,
            "bypasses": self.bypasses,
            "hit_rate": round(self.hit_rate, 4),
        }


class ValueCache(Generic[K, V]):
    """Exact-match mapping from cache key to artifact reference.

    Example:
        >>> cache: ValueCache[str, int] = ValueCache("length")
        >>> cache.find("Width") is None
        True
        >>> cache.insert("Width", 1)
        >>> cache.find("Width")
        1
    """

    def __init__(self, kind: str) -> None:
        """Initialize an empty cache.

        Args:
            kind: Semantic kind this cache serves, used in diagnostics
        """
        self._kind = kind
        self._store: dict[K, V] = {}
        self.stats = CacheStats()

    @property
    def kind(self) -> str:
        """Return the semantic kind this cache serves."""
        return self._kind

    def find(self, key: K) -> V | None:
        """Look up a key.

        Args:
            key: Cache key to look up

        Returns:
            Stored value or None
        """
        value = self._store.get(key)
        if value is None:
            self.stats.misses += 1
        else:
            self.stats.hits += 1
        return value

    def insert(self, key: K, value: V) -> None:
        """Store a value under a key that is not yet present.

        Re-inserting the identical value is a no-op.

        Args:
            key: Cache key
            value: Value to store

        Raises:
            ConsistencyFault: If the key already maps to a different value
        """
        existing = self._store.get(key)
        if existing is not None:
            if existing is value:
                return
            logger.error(
                "cache consistency fault",
                kind=self._kind,
                key=str(key),
                existing=repr(existing),
                attempted=repr(value),
            )
            raise ConsistencyFault(
                f"Key {key} already interned in {self._kind} cache",
                key=key,
                existing=existing,
                attempted=value,
            )
        self._store[key] = value
        self.stats.inserts += 1

    def record_bypass(self) -> None:
        """Count a request that was not cacheable."""
        self.stats.bypasses += 1

    def keys(self) -> list[K]:
        """Return all keys currently interned."""
        return list(self._store.keys())

    def clear(self) -> int:
        """Drop every entry. Only called when the owning session ends.

        Returns:
            Number of entries cleared
        """
        count = len(self._store)
        self._store.clear()
        return count

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[K]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        """Return string representation of cache."""
        return f"ValueCache(kind={self._kind!r}, entries={len(self._store)})"
