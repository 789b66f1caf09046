"""Quantization policies, one per semantic kind.

Each policy decides whether a raw value may be snapped to a reusable
canonical value and computes that value.
"""

from pset_cache.core.constants import SemanticKind
from pset_cache.policies.base import (
    CacheDecision,
    PolicyContext,
    QuantizationPolicy,
    is_almost_equal,
    is_almost_zero,
)
from pset_cache.policies.discrete import (
    boolean_policy,
    identifier_policy,
    label_policy,
    logical_policy,
    text_policy,
    to_logical,
)
from pset_cache.policies.enumeration import EnumerationLabels, normalize_label
from pset_cache.policies.numeric import (
    integer_policy,
    length_policy,
    plane_angle_policy,
    power_policy,
    real_policy,
    temperature_policy,
    thermal_transmittance_policy,
)


POLICIES: dict[SemanticKind, QuantizationPolicy] = {
    SemanticKind.LENGTH: length_policy,
    SemanticKind.REAL: real_policy,
    SemanticKind.PLANE_ANGLE: plane_angle_policy,
    SemanticKind.THERMODYNAMIC_TEMPERATURE: temperature_policy,
    SemanticKind.POWER: power_policy,
    SemanticKind.THERMAL_TRANSMITTANCE: thermal_transmittance_policy,
    SemanticKind.BOOLEAN: boolean_policy,
    SemanticKind.LOGICAL: logical_policy,
    SemanticKind.INTEGER: integer_policy,
    SemanticKind.IDENTIFIER: identifier_policy,
    SemanticKind.LABEL: label_policy,
    SemanticKind.TEXT: text_policy,
}


def policy_for(kind: SemanticKind) -> QuantizationPolicy:
    """Return the quantization policy for a semantic kind.

    Raises:
        KeyError: If no policy is registered for the kind
    """
    return POLICIES[kind]


__all__ = [
    "POLICIES",
    "CacheDecision",
    "EnumerationLabels",
    "PolicyContext",
    "QuantizationPolicy",
    "boolean_policy",
    "identifier_policy",
    "integer_policy",
    "is_almost_equal",
    "is_almost_zero",
    "label_policy",
    "length_policy",
    "logical_policy",
    "normalize_label",
    "plane_angle_policy",
    "policy_for",
    "power_policy",
    "real_policy",
    "temperature_policy",
    "text_policy",
    "thermal_transmittance_policy",
    "to_logical",
]
