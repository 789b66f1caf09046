"""Accepted label tables for enumerated property values.

Each table maps a normalized spelling (lowercased, with spaces and
underscores removed) to the canonical label. Tables are built once per
enumeration type and reused for every request.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import Enum
from functools import lru_cache


def normalize_label(text: str) -> str:
    """Normalize a label for case, space and underscore insensitive matching.

    Example:
        >>> normalize_label("Not_Defined ")
        'notdefined'
    """
    return "".join(ch for ch in text.casefold() if ch not in " _")


class EnumerationLabels:
    """Precomputed normalized-label -> canonical-label mapping.

    Example:
        >>> labels = EnumerationLabels(["NOTDEFINED", "USERDEFINED", "CIRCULAR"])
        >>> labels.match("user_defined")
        'USERDEFINED'
        >>> labels.match("square") is None
        True
    """

    def __init__(self, labels: Iterable[str], name: str = "") -> None:
        """Build the lookup table.

        Args:
            labels: Canonical label spellings, in declaration order
            name: Optional enumeration name used in diagnostics

        Raises:
            ValueError: If two labels normalize to the same spelling
        """
        self._name = name
        self._labels: tuple[str, ...] = tuple(labels)
        self._by_normalized: dict[str, str] = {}
        for label in self._labels:
            normalized = normalize_label(label)
            previous = self._by_normalized.get(normalized)
            if previous is not None and previous != label:
                raise ValueError(
                    f"Labels {previous!r} and {label!r} are indistinguishable "
                    f"in enumeration {name or '<anonymous>'}"
                )
            self._by_normalized[normalized] = label

    @classmethod
    def from_enum(cls, enum_type: type[Enum]) -> EnumerationLabels:
        """Return the (shared) label table for an Enum class, keyed by member name."""
        return _labels_for_enum(enum_type)

    @property
    def name(self) -> str:
        return self._name

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    def match(self, value: str) -> str | None:
        """Return the canonical label matching ``value``, or None."""
        return self._by_normalized.get(normalize_label(value))

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.match(value) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"EnumerationLabels(name={self._name!r}, labels={len(self._labels)})"


@lru_cache(maxsize=None)
def _labels_for_enum(enum_type: type[Enum]) -> EnumerationLabels:
    return EnumerationLabels((member.name for member in enum_type), name=enum_type.__name__)
