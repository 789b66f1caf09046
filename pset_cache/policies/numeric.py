"""Quantization policies for numeric kinds.

Continuous kinds are snapped to a bounded set of buckets so that a whole
document produces at most a few hundred distinct records per kind:

- length: multiples of 1/2" up to 10' (foot scales) or 50mm up to 10m
- real: the length buckets, applied to any value with a unit scale
- power: multiples of 5 between 0 and 300
- thermodynamic temperature: half units, unbounded
- thermal transmittance: multiples of 0.05 between 0 and 6
- plane angle: exact multiples of 15 degrees

Any continuous value within eps of zero canonicalizes to exactly 0.0.
"""

from __future__ import annotations

import math
from typing import Any

from pset_cache.core.constants import (
    FOOT_SCALES,
    HALF_INCHES_PER_FOOT,
    INTEGER_MAX,
    INTEGER_MIN,
    MAX_HALF_INCH_BUCKETS,
    MAX_METRIC_BUCKETS,
    METRIC_BUCKET_MM,
    MM_PER_FOOT,
    PLANE_ANGLE_STEP,
    POWER_MAX,
    POWER_STEP,
    TEMPERATURE_DIVISIONS,
    THERMAL_TRANSMITTANCE_DIVISIONS,
    THERMAL_TRANSMITTANCE_MAX,
    SemanticKind,
)
from pset_cache.policies.base import (
    CacheDecision,
    PolicyContext,
    is_almost_equal,
    is_almost_zero,
    require_integer,
    require_real,
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _continuous(value: Any, kind: SemanticKind, eps: float) -> tuple[float, CacheDecision | None]:
    """Validate a continuous value and settle the zero and non-finite cases."""
    number = require_real(value, kind.value)
    if not math.isfinite(number):
        return number, CacheDecision.reject(number)
    if is_almost_zero(number, eps):
        return number, CacheDecision.accept(0.0)
    return number, None


def _snap_scaled(number: float, context: PolicyContext) -> CacheDecision:
    scale = context.scale if context.scale is not None else 1.0
    # approximate tests for the common scales are good enough here
    if any(is_almost_equal(scale, foot, context.eps) for foot in FOOT_SCALES):
        multiplier = HALF_INCHES_PER_FOOT / scale
        max_buckets = MAX_HALF_INCH_BUCKETS
    else:
        multiplier = (MM_PER_FOOT / scale) / METRIC_BUCKET_MM
        max_buckets = MAX_METRIC_BUCKETS

    scaled = number * multiplier
    buckets = _round_half_up(scaled)
    if 0 < buckets <= max_buckets and is_almost_zero(scaled - buckets, context.eps):
        return CacheDecision.accept(buckets / multiplier)
    return CacheDecision.reject(number)


def length_policy(value: Any, context: PolicyContext) -> CacheDecision:
    """Snap a length to half inches (foot scales) or 50mm steps (other scales)."""
    number, settled = _continuous(value, SemanticKind.LENGTH, context.eps)
    if settled is not None:
        return settled
    return _snap_scaled(number, context)


def real_policy(value: Any, context: PolicyContext) -> CacheDecision:
    """Scaled reals share the length buckets but are interned separately."""
    number, settled = _continuous(value, SemanticKind.REAL, context.eps)
    if settled is not None:
        return settled
    return _snap_scaled(number, context)


def power_policy(value: Any, context: PolicyContext) -> CacheDecision:
    number, settled = _continuous(value, SemanticKind.POWER, context.eps)
    if settled is not None:
        return settled

    if number < -context.eps or number > POWER_MAX + context.eps:
        return CacheDecision.reject(number)
    return CacheDecision.accept(float(_round_half_up(number / POWER_STEP)) * POWER_STEP)


def temperature_policy(value: Any, context: PolicyContext) -> CacheDecision:
    """Truncate a temperature to half units. Every finite temperature is cacheable."""
    number, settled = _continuous(value, SemanticKind.THERMODYNAMIC_TEMPERATURE, context.eps)
    if settled is not None:
        return settled

    doubled = number * TEMPERATURE_DIVISIONS
    nearest = round(doubled)
    if is_almost_equal(doubled, nearest, context.eps):
        doubled = nearest
    return CacheDecision.accept(math.trunc(doubled) / TEMPERATURE_DIVISIONS)


def thermal_transmittance_policy(value: Any, context: PolicyContext) -> CacheDecision:
    number, settled = _continuous(value, SemanticKind.THERMAL_TRANSMITTANCE, context.eps)
    if settled is not None:
        return settled

    if number < -context.eps or number > THERMAL_TRANSMITTANCE_MAX + context.eps:
        return CacheDecision.reject(number)
    steps = _round_half_up(number * THERMAL_TRANSMITTANCE_DIVISIONS)
    return CacheDecision.accept(steps / THERMAL_TRANSMITTANCE_DIVISIONS)


def plane_angle_policy(value: Any, context: PolicyContext) -> CacheDecision:
    """Only exact multiples of 15 degrees are cached."""
    number, settled = _continuous(value, SemanticKind.PLANE_ANGLE, context.eps)
    if settled is not None:
        return settled

    multiple = float(_round_half_up(number / PLANE_ANGLE_STEP)) * PLANE_ANGLE_STEP
    if is_almost_equal(number, multiple, context.eps):
        return CacheDecision.accept(multiple)
    return CacheDecision.reject(number)


def integer_policy(value: Any, context: PolicyContext) -> CacheDecision:
    number = require_integer(value, SemanticKind.INTEGER.value)
    if INTEGER_MIN <= number <= INTEGER_MAX:
        return CacheDecision.accept(number)
    return CacheDecision.reject(number)
