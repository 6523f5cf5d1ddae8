"""In-memory implementation of PrecacheEntryResolver.

The manifest is built once from a list of URLs and ``{url, revision}``
objects and is read-only afterwards. It satisfies the
PrecacheEntryResolver protocol through structural typing.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from precache_handler.config import settings
from precache_handler.dto import ManifestEntry, manifest_adapter
from precache_handler.entities import PrecacheEntry
from precache_handler.exceptions import ConflictingPrecacheEntriesError, InvalidPrecacheEntryError
from precache_handler.urls import generate_url_variations, resolve_url

logger = logging.getLogger(__name__)

ManifestItem = str | Mapping[str, Any] | PrecacheEntry


class PrecacheManifest:
    """URL -> PrecacheEntry table with at most one entry per URL.

    Example:
        ```python
        manifest = PrecacheManifest(
            ["/index.html", {"url": "/app.js", "revision": "abc123"}],
            origin="https://example.com",
        )
        manifest.lookup("https://example.com/app.js")
        # PrecacheEntry(url='https://example.com/app.js', revision='abc123')
        ```
    """

    def __init__(
        self,
        entries: Iterable[ManifestItem] = (),
        origin: str | None = None,
        directory_index: str | None = None,
        clean_urls: bool | None = None,
    ) -> None:
        """Build the manifest.

        Args:
            entries: URL strings, ``{"url", "revision"}`` mappings or entities.
            origin: Base for relative URLs. Defaults to settings.
            directory_index: File tried for URLs ending in ``/``. Defaults to
                settings; pass ``""`` to disable.
            clean_urls: Whether ``/about`` may match ``/about.html``. Defaults
                to settings.

        Raises:
            InvalidPrecacheEntryError: If an item has an unsupported shape or a query string
            ConflictingPrecacheEntriesError: If a URL is listed with two revisions
        """
        self._origin = origin or settings.origin
        self._directory_index = settings.directory_index if directory_index is None else directory_index
        self._clean_urls = settings.clean_urls if clean_urls is None else clean_urls
        self._entries: dict[str, PrecacheEntry] = {}

        for item in entries:
            self._add(self._to_entry(item))

        logger.debug("Built precache manifest with %d entries for %s", len(self._entries), self._origin)

    @classmethod
    def create(
        cls,
        entries: Iterable[ManifestItem] = (),
        origin: str | None = None,
    ) -> "PrecacheManifest":
        """Factory method to create PrecacheManifest with defaults from settings."""
        return cls(entries=entries, origin=origin)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        origin: str | None = None,
    ) -> "PrecacheManifest":
        """Load a JSON manifest file.

        Args:
            path: Path to a JSON array of URL strings and ``{url, revision}`` objects
            origin: Base for relative URLs. Defaults to settings.

        Returns:
            Configured PrecacheManifest

        Raises:
            pydantic.ValidationError: If the file is not a valid manifest
            OSError: If the file cannot be read
        """
        items = manifest_adapter.validate_json(Path(path).read_bytes())
        manifest = cls(
            entries=[item.model_dump() if isinstance(item, ManifestEntry) else item for item in items],
            origin=origin,
        )
        logger.info("Loaded %d precache entries from %s", len(manifest), path)
        return manifest

    def _to_entry(self, item: ManifestItem) -> PrecacheEntry:
        if isinstance(item, PrecacheEntry):
            return PrecacheEntry(url=self._entry_url(item, item.url), revision=item.revision)

        if isinstance(item, str):
            if not item:
                raise InvalidPrecacheEntryError(item)
            return PrecacheEntry(url=self._entry_url(item, item))

        if isinstance(item, Mapping):
            url = item.get("url")
            revision = item.get("revision")
            if not isinstance(url, str) or not url:
                raise InvalidPrecacheEntryError(item)
            if revision is not None and not isinstance(revision, str):
                raise InvalidPrecacheEntryError(item)
            return PrecacheEntry(url=self._entry_url(item, url), revision=revision)

        raise InvalidPrecacheEntryError(item)

    def _entry_url(self, item: ManifestItem, url: str) -> str:
        resolved = resolve_url(url, self._origin)
        if urlsplit(resolved).query:
            raise InvalidPrecacheEntryError(item, reason="precached URLs cannot carry a query string")
        return resolved

    def _add(self, entry: PrecacheEntry) -> None:
        existing = self._entries.get(entry.url)
        if existing is not None and existing.cache_key != entry.cache_key:
            raise ConflictingPrecacheEntriesError(existing.cache_key, entry.cache_key)
        self._entries[entry.url] = entry

    def lookup(self, normalized_url: str) -> PrecacheEntry | None:
        """Find the entry for a normalized request URL.

        Tries the URL itself, then its directory index, then its ``.html``
        clean-URL form. First match wins.

        Args:
            normalized_url: Absolute request URL without query or fragment

        Returns:
            The matching entry, or None
        """
        for candidate in generate_url_variations(
            normalized_url,
            directory_index=self._directory_index,
            clean_urls=self._clean_urls,
        ):
            entry = self._entries.get(candidate)
            if entry is not None:
                return entry
        return None

    def get_cache_key_for_url(self, url: str) -> str | None:
        """Return the cache key for an exact precached URL, or None."""
        entry = self._entries.get(resolve_url(url, self._origin))
        return entry.cache_key if entry else None

    @property
    def cached_urls(self) -> list[str]:
        """All precached URLs, in manifest order."""
        return list(self._entries)

    @property
    def origin(self) -> str:
        return self._origin

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and resolve_url(url, self._origin) in self._entries

    def __iter__(self) -> Iterator[PrecacheEntry]:
        return iter(self._entries.values())
