"""In-memory property document.

A minimal output document that owns PropertyRecord rows and hands out
references to them. Useful as the record factory when no real document
model is attached, and as the reference implementation of RecordFactory.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pset_cache.cache.artifact import ArtifactReference, PropertyRecord
from pset_cache.core.constants import PropertyValueType, SemanticKind, supports_mode
from pset_cache.core.exceptions import ConfigurationError
from pset_cache.core.logging import get_logger


logger = get_logger(__name__)


class InMemoryPropertyDocument:
    """Output document holding property records in creation order.

    Implements RecordFactory.

    Example:
        >>> document = InMemoryPropertyDocument()
        >>> ref = document.create(
        ...     "Width", 0.5, SemanticKind.LENGTH, PropertyValueType.SINGLE_VALUE
        ... )
        >>> document.get(ref).value
        0.5
    """

    def __init__(self, name: str = "document") -> None:
        self._name = name
        self._records: dict[int, PropertyRecord] = {}
        self._next_id = 1

    @property
    def name(self) -> str:
        return self._name

    def create(
        self,
        name: str,
        value: Any,
        kind: SemanticKind,
        mode: PropertyValueType,
    ) -> ArtifactReference:
        """Append a new record and return a reference to it.

        Raises:
            ConfigurationError: If ``mode`` is not supported for ``kind``
        """
        if not supports_mode(kind, mode):
            raise ConfigurationError(
                f"Representation {mode.value} is not supported for {kind.value} properties",
                kind=kind.value,
                mode=mode.value,
                property_name=name,
            )

        if mode is PropertyValueType.LIST_VALUE:
            values = tuple(value)
        else:
            values = (value,)

        record = PropertyRecord(
            record_id=self._next_id,
            name=name,
            kind=kind,
            mode=mode,
            values=values,
        )
        self._records[record.record_id] = record
        self._next_id += 1

        logger.debug("record created", record=record.qualified_name, mode=mode.value)
        return record.reference()

    def get(self, reference: ArtifactReference) -> PropertyRecord:
        """Return the record a reference points at.

        Raises:
            KeyError: If the reference does not belong to this document
        """
        return self._records[reference.record_id]

    def records(self) -> list[PropertyRecord]:
        """Return all records in creation order."""
        return list(self._records.values())

    def __iter__(self) -> Iterator[PropertyRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"InMemoryPropertyDocument(name={self._name!r}, records={len(self._records)})"
