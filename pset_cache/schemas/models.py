"""Request model for the interning cache.

PropertyRequest is created per call and discarded after use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pset_cache.core.constants import PropertyValueType, SemanticKind
from pset_cache.policies.enumeration import EnumerationLabels


# =============================================================================
# PropertyRequest
# =============================================================================


class PropertyRequest(BaseModel):
    """A request to emit one property value.

    Attributes:
        name: Property name
        raw_value: Value read from the host model
        kind: Semantic kind selecting the quantization policy
        mode: Representation mode of the emitted record
        scale: Unit scale for length values (host units per foot)
        cache_all_strings: Intern every label/text value, not only ""
        enumeration: Accepted labels for enumerated values
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Property name",
    )
    raw_value: Any = Field(
        default=None,
        description="Raw value (number, bool, Logical, str, or list of str)",
    )
    kind: SemanticKind = Field(
        ...,
        description="Semantic kind of the value",
    )
    mode: PropertyValueType = Field(
        default=PropertyValueType.SINGLE_VALUE,
        description="Representation mode",
    )
    scale: float | None = Field(
        default=None,
        gt=0.0,
        description="Unit scale for length values",
    )
    cache_all_strings: bool | None = Field(
        default=None,
        description="Intern every string value; None defers to settings",
    )
    enumeration: EnumerationLabels | None = Field(
        default=None,
        description="Accepted labels for enumerated values",
    )

