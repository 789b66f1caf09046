"""Property records and the references that point at them.

A PropertyRecord is owned by the output document. Caches and callers only
ever hold an ArtifactReference, which is cheap to copy and hashable.
"""

from dataclasses import dataclass, field
from typing import Any

from pset_cache.core.constants import PropertyValueType, SemanticKind


@dataclass
class PropertyRecord:
    """One property record in the output document.

    Attributes:
        record_id: Document-unique identifier (1-based)
        name: Property name
        kind: Semantic kind of the value
        mode: Representation mode the record was emitted with
        values: Emitted values; one entry unless mode is a list
        metadata: Additional context supplied by the document

    Example:
        >>> record = PropertyRecord(
        ...     record_id=7,
        ...     name="Width",
        ...     kind=SemanticKind.LENGTH,
        ...     mode=PropertyValueType.SINGLE_VALUE,
        ...     values=(0.5,),
        ... )
        >>> record.qualified_name
        '#7=length:Width'
    """

    record_id: int
    name: str
    kind: SemanticKind
    mode: PropertyValueType
    values: tuple[Any, ...]
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate record fields after initialization."""
        if not self.name:
            raise ValueError("Property record name cannot be empty")
        if self.record_id < 1:
            raise ValueError("Property record id must be >= 1")

    @property
    def qualified_name(self) -> str:
        """Return the document-style record label "#{id}={kind}:{name}"."""
        return f"#{self.record_id}={self.kind.value}:{self.name}"

    @property
    def value(self) -> Any:
        """Return the single value, or None for an empty record."""
        return self.values[0] if self.values else None

    def reference(self) -> "ArtifactReference":
        """Create a reference to this record."""
        return ArtifactReference(record_id=self.record_id, kind=self.kind, name=self.name)

    def to_dict(self) -> dict[str, Any]:
        """Convert record to dictionary representation."""
        return {
            "record_id": self.record_id,
            "qualified_name": self.qualified_name,
            "name": self.name,
            "kind": self.kind.value,
            "mode": self.mode.value,
            "values": list(self.values),
            "metadata": self.metadata,
        }


@dataclass(frozen=True)
class ArtifactReference:
    """Immutable, non-owning handle to a record in the output document.

    Consumers compare references by identity; the cache manager guarantees
    that equal cache keys always hand back the same reference object.

    Attributes:
        record_id: Identifier of the referenced record
        kind: Semantic kind of the referenced record
        name: Property name of the referenced record
    """

    record_id: int
    kind: SemanticKind
    name: str

    @property
    def qualified_name(self) -> str:
        """Return the document-style label of the referenced record."""
        return f"#{self.record_id}={self.kind.value}:{self.name}"
