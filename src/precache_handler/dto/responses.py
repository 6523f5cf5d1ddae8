"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error payload returned when no response can be produced."""

    code: str = Field(..., description="Stable error code, e.g. 'missing-precache-entry'")
    message: str = Field(..., description="Human-readable description")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Diagnostic values, e.g. {'url': ..., 'cacheName': ...}",
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    cache_name: str = Field(..., description="Precache namespace served by this instance")
