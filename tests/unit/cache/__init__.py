"""Test package for cache management.

Contains unit tests for:
- CacheKey and build_cache_key()
- ValueCache (per-kind interning table)
- CacheManager (session-scoped find-or-create)
- PropertyRecord and ArtifactReference
"""
