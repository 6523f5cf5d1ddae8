"""HTTP front for the precache handler.

Every GET request is handed to the precache handler as if it had been
intercepted on its way to the configured origin.

Error mapping:
    - not precached (pass-through)  -> 404
    - MissingPrecacheEntryError      -> 503
    - other PrecacheError            -> 500
    - httpx.TransportError           -> 502
"""

from typing import Any

import httpx
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from precache_handler.api.dependencies import CacheStoreDep, HandlerDep, lifespan
from precache_handler.config import settings
from precache_handler.dto import ErrorResponse, HealthCheckResponse
from precache_handler.exceptions import MissingPrecacheEntryError, PrecacheError
from precache_handler.handlers import PASS_THROUGH

# Recomputed by httpx after decoding, or meaningful for one hop only
EXCLUDED_RESPONSE_HEADERS = frozenset(
    {
        "connection",
        "content-encoding",
        "content-length",
        "keep-alive",
        "transfer-encoding",
    }
)

app = FastAPI(
    title="Precache Handler",
    description="Cache-first serving of revisioned precached assets with optional network fallback",
    version="0.1.0",
    lifespan=lifespan,
)


def _error(status_code: int, code: str, message: str, details: dict[str, Any] | None = None) -> JSONResponse:
    body = ErrorResponse(code=code, message=message, details=details or {})
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(MissingPrecacheEntryError)
async def missing_precache_entry(request: Request, exc: MissingPrecacheEntryError) -> JSONResponse:
    return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc.code, exc.message, exc.details)


@app.exception_handler(PrecacheError)
async def precache_error(request: Request, exc: PrecacheError) -> JSONResponse:
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.code, exc.message, exc.details)


@app.exception_handler(httpx.TransportError)
async def network_error(request: Request, exc: httpx.TransportError) -> JSONResponse:
    return _error(
        status.HTTP_502_BAD_GATEWAY,
        "network-error",
        f"Network fetch failed: {exc!r}",
    )


def to_response(upstream: httpx.Response) -> Response:
    """Convert a stored or fetched httpx response into a FastAPI response."""
    headers = {
        name: value
        for name, value in upstream.headers.items()
        if name.lower() not in EXCLUDED_RESPONSE_HEADERS
    }
    return Response(content=upstream.content, status_code=upstream.status_code, headers=headers)


@app.get("/health", response_model=HealthCheckResponse)
async def health(cache_store: CacheStoreDep) -> HealthCheckResponse:
    """Health check endpoint."""
    is_healthy = await cache_store.health_check()
    return HealthCheckResponse(
        status="healthy" if is_healthy else "unhealthy",
        cache_healthy=is_healthy,
        cache_name=cache_store.cache_name,
    )


@app.get("/{path:path}")
async def serve(path: str, request: Request, handler: HandlerDep) -> Response:
    """Serve a precached asset, falling back to the network when allowed."""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"

    response = await handler(target, event=request)
    if response is PASS_THROUGH:
        return _error(
            status.HTTP_404_NOT_FOUND,
            "not-precached",
            f"{target} is not in the precache manifest.",
            {"url": target},
        )
    return to_response(response)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "precache_handler.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
