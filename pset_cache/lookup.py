"""Depth-bounded parameter lookup over an instance -> type fallback chain.

A raw value is looked up on the element first, then on its type, then on
the type's type, and so on. The chain is walked iteratively with a depth
bound and a visited set, so a malformed or cyclic type reference in the
host model cannot cause unbounded work.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from pset_cache.core.config import get_settings
from pset_cache.core.logging import get_logger


logger = get_logger(__name__)


@runtime_checkable
class ParameterSource(Protocol):
    """Something that can answer parameter lookups and may have a parent.

    Attributes:
        parent: Next source to consult (e.g. the element's type), or None
    """

    parent: ParameterSource | None

    def get_parameter(self, name: str) -> Any | None:
        """Return the parameter value, or None if the source does not have it."""
        ...


@dataclass(eq=False)
class MappingParameterSource:
    """ParameterSource backed by a plain mapping.

    Example:
        >>> wall_type = MappingParameterSource("WallType", {"Width": 0.5})
        >>> wall = MappingParameterSource("Wall", {"Mark": "W1"}, parent=wall_type)
        >>> find_parameter(lookup_chain(wall), "Width")
        0.5
    """

    label: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    parent: ParameterSource | None = None

    def get_parameter(self, name: str) -> Any | None:
        return self.parameters.get(name)

    def __repr__(self) -> str:
        return f"MappingParameterSource({self.label!r})"


def lookup_chain(source: ParameterSource, max_depth: int | None = None) -> list[ParameterSource]:
    """Flatten a source and its parents into an ordered lookup list.

    Args:
        source: Source to start from (usually the element instance)
        max_depth: Maximum number of sources; defaults to settings

    Returns:
        Sources in lookup order, without repeats
    """
    if max_depth is None:
        max_depth = get_settings().lookup_max_depth

    chain: list[ParameterSource] = []
    seen: set[int] = set()
    current: ParameterSource | None = source
    while current is not None:
        if id(current) in seen:
            logger.warning("cyclic parameter source chain", source=repr(current), depth=len(chain))
            break
        if len(chain) >= max_depth:
            logger.warning("parameter source chain truncated", max_depth=max_depth)
            break
        seen.add(id(current))
        chain.append(current)
        current = current.parent
    return chain


def find_parameter(sources: Iterable[ParameterSource], name: str) -> Any | None:
    """Return the first value found for ``name`` in ``sources``, or None."""
    for source in sources:
        value = source.get_parameter(name)
        if value is not None:
            return value
    return None


def find_parameter_any(
    sources: Iterable[ParameterSource],
    names: Iterable[str],
) -> tuple[str, Any] | tuple[None, None]:
    """Try several parameter names in order on every source.

    Names are tried in order within a source before moving to the next
    source, so an instance value under a fallback name wins over a type
    value under the preferred name.

    Returns:
        (name, value) of the first hit, or (None, None)
    """
    names = list(names)
    for source in sources:
        for name in names:
            value = source.get_parameter(name)
            if value is not None:
                return name, value
    return None, None
