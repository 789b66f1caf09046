"""Property kinds, representation modes, and quantization constants.

Provides centralized constants for the property interning cache:
- Semantic kinds (one cache per kind per session)
- Representation modes and the modes each kind accepts
- The tri-state logical value domain
- Bucket bounds used by the quantization policies
"""

from enum import Enum


# =============================================================================
# Semantic Kinds
# =============================================================================

class SemanticKind(str, Enum):
    """Measurement or value category of a property.

    Each kind owns exactly one ValueCache inside a session and is
    canonicalized by exactly one quantization policy.
    """
    LENGTH = "length"
    REAL = "real"
    PLANE_ANGLE = "plane_angle"
    THERMODYNAMIC_TEMPERATURE = "thermodynamic_temperature"
    POWER = "power"
    THERMAL_TRANSMITTANCE = "thermal_transmittance"
    BOOLEAN = "boolean"
    LOGICAL = "logical"
    INTEGER = "integer"
    IDENTIFIER = "identifier"
    LABEL = "label"
    TEXT = "text"


# =============================================================================
# Representation Modes
# =============================================================================

class PropertyValueType(str, Enum):
    """How a property is emitted in the output document."""
    SINGLE_VALUE = "single_value"
    ENUMERATED_VALUE = "enumerated_value"
    LIST_VALUE = "list_value"


_SCALAR_MODES: frozenset[PropertyValueType] = frozenset({
    PropertyValueType.SINGLE_VALUE,
    PropertyValueType.ENUMERATED_VALUE,
})

# Only labels may be emitted as a list of values
SUPPORTED_MODES: dict[SemanticKind, frozenset[PropertyValueType]] = {
    kind: _SCALAR_MODES for kind in SemanticKind
}
SUPPORTED_MODES[SemanticKind.LABEL] = _SCALAR_MODES | {PropertyValueType.LIST_VALUE}


def supports_mode(kind: SemanticKind, mode: PropertyValueType) -> bool:
    """Return True if ``kind`` can be emitted with representation ``mode``.

    Example:
        >>> supports_mode(SemanticKind.LABEL, PropertyValueType.LIST_VALUE)
        True
        >>> supports_mode(SemanticKind.POWER, PropertyValueType.LIST_VALUE)
        False
    """
    return mode in SUPPORTED_MODES.get(kind, frozenset())


# =============================================================================
# Tri-state Logical
# =============================================================================

class Logical(str, Enum):
    """Three-valued logical: true, false, or unknown."""
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"


# =============================================================================
# Quantization Bounds
# =============================================================================

DEFAULT_EPS: float = 1e-6

# Foot-based unit scales (feet, inches)
FOOT_SCALES: tuple[float, ...] = (1.0, 12.0)

# Foot-based lengths: multiples of 1/2" up to 10'
HALF_INCHES_PER_FOOT: float = 24.0
MAX_HALF_INCH_BUCKETS: int = 240

# Metric lengths: multiples of 50mm up to 10m
MM_PER_FOOT: float = 304.8
METRIC_BUCKET_MM: float = 50.0
MAX_METRIC_BUCKETS: int = 200

POWER_STEP: float = 5.0
POWER_MAX: float = 300.0

TEMPERATURE_DIVISIONS: float = 2.0

THERMAL_TRANSMITTANCE_DIVISIONS: float = 20.0
THERMAL_TRANSMITTANCE_MAX: float = 6.0

PLANE_ANGLE_STEP: float = 15.0

INTEGER_MIN: int = -10
INTEGER_MAX: int = 10


# =============================================================================
# Default Configuration Values
# =============================================================================

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_LOOKUP_MAX_DEPTH = 8
