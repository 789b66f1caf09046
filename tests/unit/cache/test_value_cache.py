"""Unit tests for pset_cache/cache/value_cache module.

Tests the exact-match per-kind interning table.
"""

import pytest

from pset_cache.cache.artifact import ArtifactReference
from pset_cache.cache.state import CacheKey, build_cache_key
from pset_cache.cache.value_cache import CacheStats, ValueCache
from pset_cache.core.constants import SemanticKind
from pset_cache.core.exceptions import ConsistencyFault


def _reference(record_id: int, name: str = "Width") -> ArtifactReference:
    return ArtifactReference(record_id=record_id, kind=SemanticKind.LENGTH, name=name)


class TestCacheStats:
    """Tests for CacheStats dataclass."""

    def test_defaults(self) -> None:
        """Test counters start at zero."""
        stats = CacheStats()

        assert stats.lookups == 0
        assert stats.hit_rate == 0.0

    def test_hit_rate(self) -> None:
        """Test hit rate is hits over lookups."""
        stats = CacheStats(hits=3, misses=1)

        assert stats.lookups == 4
        assert stats.hit_rate == 0.75
        assert stats.to_dict()["hit_rate"] == 0.75


class TestValueCache:
    """Tests for ValueCache class."""

    @pytest.fixture
    def cache(self) -> ValueCache[CacheKey, ArtifactReference]:
        """Create an empty length cache."""
        return ValueCache(SemanticKind.LENGTH.value)

    def test_cache_creation(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test cache starts empty."""
        assert cache.kind == "length"
        assert len(cache) == 0

    def test_find_missing_returns_none(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test finding an absent key returns None and counts a miss."""
        assert cache.find(build_cache_key("Width", 0.5)) is None
        assert cache.stats.misses == 1

    def test_insert_and_find(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test an inserted reference is found by an equal key."""
        reference = _reference(1)
        cache.insert(build_cache_key("Width", 0.5), reference)

        found = cache.find(build_cache_key("Width", 0.5))

        assert found is reference
        assert cache.stats.hits == 1
        assert cache.stats.inserts == 1

    def test_keys_distinguish_names(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test the same value under another name is a different key."""
        cache.insert(build_cache_key("Width", 0.5), _reference(1))

        assert cache.find(build_cache_key("Height", 0.5)) is None

    def test_reinsert_same_reference_is_noop(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test inserting the identical reference twice is harmless."""
        key = build_cache_key("Width", 0.5)
        reference = _reference(1)

        cache.insert(key, reference)
        cache.insert(key, reference)

        assert len(cache) == 1
        assert cache.stats.inserts == 1

    def test_insert_different_reference_faults(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test a second reference for an existing key is a consistency fault."""
        key = build_cache_key("Width", 0.5)
        first = _reference(1)
        cache.insert(key, first)

        with pytest.raises(ConsistencyFault) as exc_info:
            cache.insert(key, _reference(2))

        assert exc_info.value.key == key
        assert exc_info.value.existing is first
        assert cache.find(key) is first

    def test_equal_but_distinct_reference_faults(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test sharing is by identity: an equal copy is still a fault."""
        key = build_cache_key("Width", 0.5)
        cache.insert(key, _reference(1))

        with pytest.raises(ConsistencyFault):
            cache.insert(key, _reference(1))

    def test_bypass_counter(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test bypasses are counted separately from lookups."""
        cache.record_bypass()

        assert cache.stats.bypasses == 1
        assert cache.stats.lookups == 0

    def test_contains_iter_keys(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test container helpers."""
        key = build_cache_key("Width", 0.5)
        cache.insert(key, _reference(1))

        assert key in cache
        assert list(cache) == [key]
        assert cache.keys() == [key]

    def test_clear(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test clear drops every entry and reports the count."""
        cache.insert(build_cache_key("Width", 0.5), _reference(1))
        cache.insert(build_cache_key("Width", 1.0), _reference(2))

        assert cache.clear() == 2
        assert len(cache) == 0

    def test_repr(self, cache: ValueCache[CacheKey, ArtifactReference]) -> None:
        """Test repr shows kind and size."""
        assert repr(cache) == "ValueCache(kind='length', entries=0)"
