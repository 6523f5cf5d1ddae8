"""Service layer for precache lookups.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Resolver / Store
    (fallback policy) -> (resolve + key + lookup) -> (data access)

Usage:
    ```python
    from precache_handler.services import PrecacheService

    service = PrecacheService.create(resolver=manifest, cache_store=store)
    response = await service.match_precache("/app.js")
    ```
"""

from .precache_service import PrecacheService

__all__ = [
    "PrecacheService",
]
