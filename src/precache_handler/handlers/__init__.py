"""Handler layer for intercepted requests.

A handler is the callable the interception layer invokes per request.
Handlers depend on services (lookups), not directly on stores.

Architecture:
    Handler -> Service -> Resolver / Store
    Handler -> NetworkFetcher (on a miss, when allowed)
"""

from .precache_handler import PASS_THROUGH, PrecacheHandler, create_handler

__all__ = [
    "PASS_THROUGH",
    "PrecacheHandler",
    "create_handler",
]
