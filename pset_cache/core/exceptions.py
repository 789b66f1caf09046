"""Custom exceptions for the property interning cache.

All exceptions are namespaced under PropertyCacheError so callers can
catch any cache error with a single except clause.
"""

from typing import Any


class PropertyCacheError(Exception):
    """Base exception for all property cache errors."""

    def __init__(self, message: str, property_name: str | None = None) -> None:
        """Initialize property cache error.

        Args:
            message: Error description
            property_name: Name of the property being processed
        """
        self.property_name = property_name
        super().__init__(message)


class ConfigurationError(PropertyCacheError):
    """Raised when a representation mode is not supported for a kind.

    Indicates a programming error in the caller, never a transient
    condition; it is not retried.
    """

    def __init__(
        self,
        message: str,
        kind: str,
        mode: str,
        property_name: str | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error description
            kind: Semantic kind of the request
            mode: The unsupported representation mode
            property_name: Name of the property being processed
        """
        self.kind = kind
        self.mode = mode
        super().__init__(message, property_name)


class ConsistencyFault(PropertyCacheError):
    """Raised when a cache key is inserted twice with different references.

    Identical keys must always map to the identical artifact, so this
    signals non-deterministic quantization. It is fatal to the session.
    """

    def __init__(
        self,
        message: str,
        key: Any,
        existing: Any = None,
        attempted: Any = None,
    ) -> None:
        """Initialize consistency fault.

        Args:
            message: Error description
            key: The cache key that was inserted twice
            existing: Reference already stored under the key
            attempted: Reference the caller tried to store
        """
        self.key = key
        self.existing = existing
        self.attempted = attempted
        super().__init__(message, getattr(key, "name", None))


class PropertyValidationError(PropertyCacheError):
    """Raised when a raw value has the wrong type for its kind.

    Distinct from Python's built-in ValueError to carry the offending
    kind and value.
    """

    def __init__(
        self,
        message: str,
        kind: str,
        value: Any | None = None,
        property_name: str | None = None,
    ) -> None:
        """Initialize validation error.

        Args:
            message: Error description
            kind: Semantic kind the value was offered for
            value: The invalid value
            property_name: Name of the property being processed
        """
        self.kind = kind
        self.value = value
        super().__init__(message, property_name)


class SessionClosedError(PropertyCacheError):
    """Raised when a closed cache session is used."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Cache session {session_id!r} is closed")
