"""Cache keys for interned property records.

A key is the pair (property name, canonical value). The canonical value's
type is part of the key so that ``True``, ``1`` and ``1.0`` never share a
bucket, and a str-valued enum member never collides with a plain string.

Snapped reals are compared exactly: the quantization policies guarantee
that equivalent inputs snap to bit-identical floats.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheKey:
    """Composite (name, canonical value) key.

    Attributes:
        name: Property name
        value: Canonical value produced by a quantization policy
        value_type: Qualified type name of the canonical value
    """

    name: str
    value: Any
    value_type: str

    def __str__(self) -> str:
        return f"{self.name}={self.value!r}<{self.value_type}>"


def _type_tag(value: Any) -> str:
    value_type = type(value)
    return f"{value_type.__module__}.{value_type.__qualname__}"


def build_cache_key(name: str, canonical_value: Any) -> CacheKey:
    """Build a cache key from a property name and canonical value.

    Args:
        name: Property name
        canonical_value: Hashable canonical value

    Returns:
        CacheKey for the pair

    Raises:
        ValueError: If name is empty
        TypeError: If the canonical value is not hashable

    Example:
        >>> build_cache_key("Width", 0.5)
        CacheKey(name='Width', value=0.5, value_type='builtins.float')
    """
    if not name:
        raise ValueError("name cannot be empty")

    # -0.0 == 0.0 but hashes and prints differently downstream
    if isinstance(canonical_value, float) and canonical_value == 0.0:
        canonical_value = 0.0

    hash(canonical_value)
    return CacheKey(name=name, value=canonical_value, value_type=_type_tag(canonical_value))
