"""Precache entry domain entity."""

from dataclasses import dataclass

from precache_handler.urls import create_cache_key


@dataclass(frozen=True)
class PrecacheEntry:
    """A versioned asset eligible for cache-first serving.

    Attributes:
        url: Absolute URL of the asset, without fragment. Identity of the entry.
        revision: Opaque version marker. None means the URL itself is
            assumed to change whenever the content does.
    """

    url: str
    revision: str | None = None

    @property
    def cache_key(self) -> str:
        """The key the stored response for this entry lives under."""
        return create_cache_key(self.url, self.revision)
