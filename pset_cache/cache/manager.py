"""CacheManager - session-scoped property interning.

One CacheManager exists per document generation pass. It owns one
ValueCache per semantic kind, created when the session opens and dropped
in full when it closes. There is no process-wide state, so independent
sessions never interfere.

Request flow:
    policy -> absent?    -> None, nothing created
           -> cacheable? -> find (name, canonical) -> hit: stored reference
                                                   -> miss: create, insert
           -> otherwise  -> create, never stored

Not thread-safe. If generation is ever parallelized, each ValueCache
needs an atomic find-or-insert so racing requests for the same key still
observe a single reference.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pset_cache.cache.artifact import ArtifactReference
from pset_cache.cache.state import CacheKey, build_cache_key
from pset_cache.cache.value_cache import CacheStats, ValueCache
from pset_cache.core.config import Settings, get_settings
from pset_cache.core.constants import PropertyValueType, SemanticKind, supports_mode
from pset_cache.core.exceptions import (
    ConfigurationError,
    PropertyValidationError,
    SessionClosedError,
)
from pset_cache.core.logging import get_logger
from pset_cache.document.protocols import RecordFactory
from pset_cache.policies import CacheDecision, PolicyContext, policy_for
from pset_cache.policies.enumeration import EnumerationLabels
from pset_cache.schemas.models import PropertyRequest


logger = get_logger(__name__)


class CacheManager:
    """Interning front door for one generation session.

    Example:
        >>> document = InMemoryPropertyDocument()
        >>> manager = open_session(document)
        >>> a = manager.find_or_create("Width", 0.5, SemanticKind.LENGTH)
        >>> b = manager.find_or_create("Width", 0.50000001, SemanticKind.LENGTH)
        >>> a is b
        True
        >>> close_session(manager)
    """

    def __init__(
        self,
        factory: RecordFactory,
        settings: Settings | None = None,
        session_id: str | None = None,
    ) -> None:
        """Open a session with empty caches.

        Args:
            factory: Builds records on cache misses
            settings: Settings to use; defaults to get_settings()
            session_id: Identifier for diagnostics; generated when omitted
        """
        self._factory = factory
        self._settings = settings or get_settings()
        self._session_id = session_id or uuid.uuid4().hex[:12]
        self._caches: dict[SemanticKind, ValueCache[CacheKey, ArtifactReference]] = {
            kind: ValueCache(kind.value) for kind in SemanticKind
        }
        self._closed = False
        self._log = logger.bind(session_id=self._session_id)
        self._log.debug("cache session opened", eps=self._settings.eps)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def factory(self) -> RecordFactory:
        return self._factory

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError(self._session_id)

    def cache_for(self, kind: SemanticKind) -> ValueCache[CacheKey, ArtifactReference]:
        """Return the ValueCache serving a kind."""
        self._ensure_open()
        return self._caches[kind]

    def decide(self, request: PropertyRequest) -> CacheDecision:
        """Run the kind's quantization policy for a request."""
        cache_all_strings = request.cache_all_strings
        if cache_all_strings is None:
            cache_all_strings = (
                request.kind is SemanticKind.LABEL and self._settings.cache_all_label_strings
            )
        context = PolicyContext(
            mode=request.mode,
            scale=request.scale,
            eps=self._settings.eps,
            cache_all_strings=cache_all_strings,
            enumeration=request.enumeration,
        )
        try:
            return policy_for(request.kind)(request.raw_value, context)
        except PropertyValidationError as e:
            if e.property_name is None:
                e.property_name = request.name
            raise

    def find_or_create(
        self,
        name: str,
        raw_value: Any,
        kind: SemanticKind,
        mode: PropertyValueType = PropertyValueType.SINGLE_VALUE,
        scale: float | None = None,
        *,
        cache_all_strings: bool | None = None,
        enumeration: EnumerationLabels | None = None,
    ) -> ArtifactReference | None:
        """Return the shared record for a value, creating it if needed.

        Args:
            name: Property name
            raw_value: Value read from the host model
            kind: Semantic kind selecting the quantization policy
            mode: Representation mode of the record
            scale: Unit scale for length values
            cache_all_strings: Intern every label/text value, not only ""
            enumeration: Accepted labels for enumerated values

        Returns:
            Reference to the record, or None when an enumerated value
            matched no accepted label

        Raises:
            ConfigurationError: If ``mode`` is not supported for ``kind``
            PropertyValidationError: If the value has the wrong type
            ConsistencyFault: If the cache already holds a different
                reference for the same key
            SessionClosedError: If the session has been closed
        """
        request = PropertyRequest(
            name=name,
            raw_value=raw_value,
            kind=kind,
            mode=mode,
            scale=scale,
            cache_all_strings=cache_all_strings,
            enumeration=enumeration,
        )
        return self.find_or_create_request(request)

    def find_or_create_request(self, request: PropertyRequest) -> ArtifactReference | None:
        """Same as find_or_create, for a prebuilt request."""
        self._ensure_open()
        name, kind, mode = request.name, request.kind, request.mode

        if not supports_mode(kind, mode):
            raise ConfigurationError(
                f"Representation {mode.value} is not supported for {kind.value} properties",
                kind=kind.value,
                mode=mode.value,
                property_name=name,
            )

        decision = self.decide(request)
        cache = self._caches[kind]

        if decision.absent:
            self._log.debug("value absent", kind=kind.value, name=name, raw_value=request.raw_value)
            return None

        if not decision.cacheable:
            cache.record_bypass()
            self._log.debug("cache bypass", kind=kind.value, name=name)
            return self._factory.create(name, decision.canonical_value, kind, mode)

        key = build_cache_key(name, decision.canonical_value)
        reference = cache.find(key)
        if reference is not None:
            self._log.debug("cache hit", kind=kind.value, key=str(key))
            return reference

        reference = self._factory.create(name, decision.canonical_value, kind, mode)
        if reference is None:
            return None
        cache.insert(key, reference)
        self._log.debug("cache miss", kind=kind.value, key=str(key), record=repr(reference))
        return reference

    def stats(self) -> dict[SemanticKind, CacheStats]:
        """Return the counters of every per-kind cache."""
        return {kind: cache.stats for kind, cache in self._caches.items()}

    def size(self) -> int:
        """Return the number of interned entries across all kinds."""
        return sum(len(cache) for cache in self._caches.values())

    def close(self) -> int:
        """Drop every per-kind cache. Closing twice is a no-op.

        Returns:
            Number of entries dropped
        """
        if self._closed:
            return 0
        summary = {
            kind.value: cache.stats.to_dict()
            for kind, cache in self._caches.items()
            if cache.stats.lookups or cache.stats.bypasses
        }
        dropped = sum(cache.clear() for cache in self._caches.values())
        self._caches = {}
        self._closed = True
        self._log.info("cache session closed", entries=dropped, stats=summary)
        return dropped

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"entries={self.size()}"
        return f"CacheManager(session_id={self._session_id!r}, {state})"


def open_session(
    factory: RecordFactory,
    settings: Settings | None = None,
    session_id: str | None = None,
) -> CacheManager:
    """Start a generation session with empty caches."""
    return CacheManager(factory, settings=settings, session_id=session_id)


def close_session(manager: CacheManager) -> None:
    """End a generation session, dropping all of its caches."""
    manager.close()


@contextmanager
def session(
    factory: RecordFactory,
    settings: Settings | None = None,
    session_id: str | None = None,
) -> Iterator[CacheManager]:
    """Context manager pairing open_session and close_session.

    Example:
        ```python
        with session(document) as manager:
            manager.find_or_create("IsExternal", True, SemanticKind.BOOLEAN)
        ```
    """
    manager = open_session(factory, settings=settings, session_id=session_id)
    try:
        yield manager
    finally:
        close_session(manager)
