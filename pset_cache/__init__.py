"""pset-cache: session-scoped interning of property records.

Deduplicates the near-identical property values produced while a large
building model is converted into a structured output document. Each value
is snapped to a canonical bucket by a per-kind quantization policy and,
where that is safe, shared with every other request for the same bucket.
"""

from pset_cache.cache import (
    ArtifactReference,
    CacheKey,
    CacheManager,
    CacheStats,
    PropertyRecord,
    ValueCache,
    close_session,
    open_session,
    session,
)
from pset_cache.core import (
    ConfigurationError,
    ConsistencyFault,
    Logical,
    PropertyCacheError,
    PropertyValidationError,
    PropertyValueType,
    SemanticKind,
    SessionClosedError,
    Settings,
    configure_logging,
    get_settings,
)
from pset_cache.document import InMemoryPropertyDocument, RecordFactory
from pset_cache.exporter import PropertySetCollector, SkippedProperty
from pset_cache.policies import CacheDecision, EnumerationLabels, PolicyContext, policy_for
from pset_cache.schemas import PropertyRequest


__version__ = "0.1.0"

__all__ = [
    "ArtifactReference",
    "CacheDecision",
    "CacheKey",
    "CacheManager",
    "CacheStats",
    "ConfigurationError",
    "ConsistencyFault",
    "EnumerationLabels",
    "InMemoryPropertyDocument",
    "Logical",
    "PolicyContext",
    "PropertyCacheError",
    "PropertyRecord",
    "PropertyRequest",
    "PropertySetCollector",
    "PropertyValidationError",
    "PropertyValueType",
    "RecordFactory",
    "SemanticKind",
    "SessionClosedError",
    "Settings",
    "SkippedProperty",
    "ValueCache",
    "__version__",
    "close_session",
    "configure_logging",
    "get_settings",
    "open_session",
    "policy_for",
    "session",
]
