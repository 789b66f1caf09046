"""Core module - Configuration, logging, constants, and exceptions.

Exports:
    - Settings, get_settings: Pydantic Settings configuration
    - configure_logging, get_logger: Structured logging (structlog)
    - SemanticKind, PropertyValueType, Logical: Property constants
    - Exception classes: PropertyCacheError, ConfigurationError, etc.
"""

from pset_cache.core.config import Settings, get_settings
from pset_cache.core.constants import (
    SUPPORTED_MODES,
    Logical,
    PropertyValueType,
    SemanticKind,
    supports_mode,
)
from pset_cache.core.exceptions import (
    ConfigurationError,
    ConsistencyFault,
    PropertyCacheError,
    PropertyValidationError,
    SessionClosedError,
)
from pset_cache.core.logging import configure_logging, get_logger


__all__ = [
    "SUPPORTED_MODES",
    "ConfigurationError",
    "ConsistencyFault",
    "Logical",
    "PropertyCacheError",
    "PropertyValidationError",
    "PropertyValueType",
    "SemanticKind",
    "SessionClosedError",
    "Settings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "supports_mode",
]
