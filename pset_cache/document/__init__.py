"""Output document boundary: the record factory protocol and an in-memory document."""

from pset_cache.document.memory import InMemoryPropertyDocument
from pset_cache.document.protocols import RecordFactory


__all__ = [
    "InMemoryPropertyDocument",
    "RecordFactory",
]
