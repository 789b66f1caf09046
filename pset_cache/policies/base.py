"""Shared types and tolerance helpers for the quantization policies.

A policy is a pure function ``(raw_value, context) -> CacheDecision``.
Policies never allocate records and never perform I/O.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pset_cache.core.constants import DEFAULT_EPS, PropertyValueType
from pset_cache.core.exceptions import PropertyValidationError
from pset_cache.policies.enumeration import EnumerationLabels


@dataclass(frozen=True)
class CacheDecision:
    """Verdict of a quantization policy.

    Attributes:
        cacheable: Whether the canonical value may be interned
        canonical_value: Value to emit and to key the cache with
        absent: The raw value degraded to "no value"
    """

    cacheable: bool
    canonical_value: Any = None
    absent: bool = False

    @classmethod
    def accept(cls, canonical_value: Any) -> CacheDecision:
        return cls(cacheable=True, canonical_value=canonical_value)

    @classmethod
    def reject(cls, value: Any) -> CacheDecision:
        """Not cacheable; ``value`` is emitted as is."""
        return cls(cacheable=False, canonical_value=value)

    @classmethod
    def missing(cls) -> CacheDecision:
        """The value could not be matched and is treated as absent."""
        return cls(cacheable=False, canonical_value=None, absent=True)


@dataclass(frozen=True)
class PolicyContext:
    """Per-request inputs a policy may consult besides the raw value.

    Attributes:
        mode: Representation mode of the request
        scale: Unit scale for length values, None when not supplied
        eps: Snapping tolerance
        cache_all_strings: Intern every label/text value, not only ""
        enumeration: Accepted labels for enumerated values
    """

    mode: PropertyValueType = PropertyValueType.SINGLE_VALUE
    scale: float | None = None
    eps: float = DEFAULT_EPS
    cache_all_strings: bool = False
    enumeration: EnumerationLabels | None = None


QuantizationPolicy = Callable[[Any, PolicyContext], CacheDecision]


def is_almost_equal(a: float, b: float, eps: float) -> bool:
    """Return True if ``a`` and ``b`` agree within ``eps`` (relative or absolute).

    Example:
        >>> is_almost_equal(44.999999, 45.0, 1e-6)
        True
        >>> is_almost_equal(47.0, 45.0, 1e-6)
        False
    """
    return math.isclose(a, b, rel_tol=eps, abs_tol=eps)


def is_almost_zero(value: float, eps: float) -> bool:
    return abs(value) <= eps


def require_real(value: Any, kind: str) -> float:
    """Coerce a raw value to float, rejecting bools and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise PropertyValidationError(
            f"Expected a real number for {kind}, got {type(value).__name__}",
            kind=kind,
            value=value,
        )
    return float(value)


def require_integer(value: Any, kind: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise PropertyValidationError(
            f"Expected an integer for {kind}, got {type(value).__name__}",
            kind=kind,
            value=value,
        )
    return int(value)


def require_string(value: Any, kind: str) -> str:
    if not isinstance(value, str):
        raise PropertyValidationError(
            f"Expected a string for {kind}, got {type(value).__name__}",
            kind=kind,
            value=value,
        )
    return value
