"""Property set collection with per-property failure isolation.

An exporter emits a property set by requesting one record per property.
A property whose request fails (unsupported representation, wrong value
type, factory failure) is skipped and reported; the rest of the set, and
the rest of the document, are still emitted.

Consistency faults and closed sessions are never skipped: both mean the
session itself can no longer be trusted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pset_cache.cache.artifact import ArtifactReference
from pset_cache.cache.manager import CacheManager
from pset_cache.core.constants import PropertyValueType, SemanticKind
from pset_cache.core.exceptions import ConsistencyFault, SessionClosedError
from pset_cache.core.logging import get_logger
from pset_cache.policies.enumeration import EnumerationLabels


logger = get_logger(__name__)

DEFAULT_SKIP_ON: tuple[type[Exception], ...] = (Exception,)

_FATAL: tuple[type[Exception], ...] = (ConsistencyFault, SessionClosedError)


@dataclass(frozen=True)
class SkippedProperty:
    """A property left out of its set.

    Attributes:
        name: Property name
        kind: Semantic kind of the request
        reason: Error message of the failure
        error_type: Class name of the failure
    """

    name: str
    kind: SemanticKind
    reason: str
    error_type: str


@dataclass
class PropertySetCollector:
    """Collect the records of one property set.

    Attributes:
        manager: Session the records are interned in
        set_name: Name of the property set, for diagnostics
        skip_on: Exception types that skip a property instead of propagating;
            by default every error except a consistency fault or closed session
        references: Records collected so far, in request order
        skipped: Properties left out, in request order
        absent: Names of properties whose value degraded to "no value"

    Example:
        ```python
        collector = PropertySetCollector(manager, "Pset_WallCommon")
        collector.add("IsExternal", True, SemanticKind.BOOLEAN)
        collector.add("Reference", "", SemanticKind.IDENTIFIER)
        refs = collector.references
        ```
    """

    manager: CacheManager
    set_name: str = ""
    skip_on: tuple[type[Exception], ...] = DEFAULT_SKIP_ON
    references: list[ArtifactReference] = field(default_factory=list)
    skipped: list[SkippedProperty] = field(default_factory=list)
    absent: list[str] = field(default_factory=list)

    def add(
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
        """Request a record and add it to the set.

        Returns:
            The record reference, or None if the property was skipped or absent

        Raises:
            ConsistencyFault: The session's caches are inconsistent
            SessionClosedError: The session has been closed
        """
        try:
            reference = self.manager.find_or_create(
                name,
                raw_value,
                kind,
                mode,
                scale,
                cache_all_strings=cache_all_strings,
                enumeration=enumeration,
            )
        except _FATAL:
            raise
        except self.skip_on as e:
            logger.warning(
                "property skipped",
                property_set=self.set_name,
                name=name,
                kind=kind.value,
                error=str(e),
            )
            self.skipped.append(
                SkippedProperty(name=name, kind=kind, reason=str(e), error_type=type(e).__name__)
            )
            return None

        if reference is None:
            self.absent.append(name)
            return None

        self.references.append(reference)
        return reference

    def __len__(self) -> int:
        return len(self.references)

    @property
    def is_empty(self) -> bool:
        """True if no property of the set produced a record."""
        return not self.references
