"""Precache manifest file DTOs.

A manifest is a JSON array whose items are either URL strings or objects::

    ["/index.html", {"url": "/app.js", "revision": "abc123"}]
"""

from pydantic import BaseModel, Field, TypeAdapter


class ManifestEntry(BaseModel):
    """Object form of a manifest item."""

    url: str = Field(..., description="Asset URL, absolute or relative to the origin", min_length=1)
    revision: str | None = Field(
        None,
        description="Content revision; omit for URLs that embed their own version",
    )


manifest_adapter: TypeAdapter[list[str | ManifestEntry]] = TypeAdapter(list[str | ManifestEntry])
