"""Quantization policies for finite and string kinds.

Booleans, tri-state logicals and identifiers are always interned. Labels
and text are interned only when empty, unless the caller opts in to
interning every string for that call site.
"""

from __future__ import annotations

from typing import Any

from pset_cache.core.constants import Logical, PropertyValueType, SemanticKind
from pset_cache.core.exceptions import PropertyValidationError
from pset_cache.policies.base import CacheDecision, PolicyContext, require_string


def boolean_policy(value: Any, context: PolicyContext) -> CacheDecision:
    if not isinstance(value, bool):
        raise PropertyValidationError(
            f"Expected a bool for boolean, got {type(value).__name__}",
            kind=SemanticKind.BOOLEAN.value,
            value=value,
        )
    return CacheDecision.accept(value)


def to_logical(value: Any) -> Logical:
    """Convert a bool, None, Logical or logical label to a Logical.

    Example:
        >>> to_logical(True)
        <Logical.TRUE: 'true'>
        >>> to_logical(None)
        <Logical.UNKNOWN: 'unknown'>
    """
    if isinstance(value, Logical):
        return value
    if value is None:
        return Logical.UNKNOWN
    if isinstance(value, bool):
        return Logical.TRUE if value else Logical.FALSE
    if isinstance(value, str):
        try:
            return Logical(value.strip().lower())
        except ValueError:
            pass
    raise PropertyValidationError(
        f"Cannot interpret {value!r} as a logical value",
        kind=SemanticKind.LOGICAL.value,
        value=value,
    )


def logical_policy(value: Any, context: PolicyContext) -> CacheDecision:
    return CacheDecision.accept(to_logical(value))


def identifier_policy(value: Any, context: PolicyContext) -> CacheDecision:
    """Identifiers recur heavily across a document; always intern them."""
    return CacheDecision.accept(require_string(value, SemanticKind.IDENTIFIER.value))


def _string_policy(value: Any, context: PolicyContext, kind: SemanticKind) -> CacheDecision:
    if context.mode is PropertyValueType.LIST_VALUE:
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise PropertyValidationError(
                f"Expected a list of strings for a {kind.value} list",
                kind=kind.value,
                value=value,
            )
        # list records are never shared
        return CacheDecision.reject(tuple(require_string(item, kind.value) for item in value))

    text = require_string(value, kind.value)

    if context.mode is PropertyValueType.ENUMERATED_VALUE and context.enumeration is not None:
        label = context.enumeration.match(text)
        if label is None:
            return CacheDecision.missing()
        text = label

    if text == "" or context.cache_all_strings:
        return CacheDecision.accept(text)
    return CacheDecision.reject(text)


def label_policy(value: Any, context: PolicyContext) -> CacheDecision:
    return _string_policy(value, context, SemanticKind.LABEL)


def text_policy(value: Any, context: PolicyContext) -> CacheDecision:
    return _string_policy(value, context, SemanticKind.TEXT)
