"""Request schemas."""

from pset_cache.schemas.models import PropertyRequest


__all__ = ["PropertyRequest"]
