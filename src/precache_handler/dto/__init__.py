"""Data Transfer Objects for external contracts.

These Pydantic models define the manifest file format and the HTTP error
and health payloads. They are used for validation and serialization only.

Internal domain logic should use entities from the entities package.
"""

from .manifest import ManifestEntry, manifest_adapter
from .responses import ErrorResponse, HealthCheckResponse

__all__ = [
    "ManifestEntry",
    "manifest_adapter",
    "ErrorResponse",
    "HealthCheckResponse",
]
