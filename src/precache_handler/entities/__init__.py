"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .lookup_result import LookupResult
from .precache_entry import PrecacheEntry

__all__ = ["LookupResult", "PrecacheEntry"]
