"""Record factory protocol.

The output document is an external collaborator. The cache only needs a
way to create a record on a cache miss; any object with a matching
``create`` method can be used.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pset_cache.cache.artifact import ArtifactReference
from pset_cache.core.constants import PropertyValueType, SemanticKind


@runtime_checkable
class RecordFactory(Protocol):
    """Protocol for output document record builders.

    Methods:
        create: Build a new property record and return a reference to it
    """

    def create(
        self,
        name: str,
        value: Any,
        kind: SemanticKind,
        mode: PropertyValueType,
    ) -> ArtifactReference:
        """Build a new property record.

        Args:
            name: Property name
            value: Canonical value (or raw value when not cacheable)
            kind: Semantic kind of the value
            mode: Representation mode

        Returns:
            Reference to the new record

        Raises:
            ConfigurationError: If ``mode`` is not supported for ``kind``
        """
        ...
