"""Domain exceptions for the precache layer.

Exceptions here are transport-agnostic: the handler and service raise them,
and the API layer decides which HTTP status code each one maps to.

Every error carries a stable ``code`` (the kebab-case name used in logs and
error payloads) and a ``details`` dictionary with the values needed to
diagnose it.
"""

from typing import Any


class PrecacheError(Exception):
    """Base exception for all precache domain errors."""

    code: str = "precache-error"
    template: str = "Precache operation failed."

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        self.details: dict[str, Any] = details or {}
        super().__init__(self.template.format(**self.details))

    @property
    def message(self) -> str:
        return str(self)


class MissingPrecacheEntryError(PrecacheError):
    """No stored response exists for a precached URL and network fallback is off.

    Raised only by the request handler. Never retried.
    """

    code = "missing-precache-entry"
    template = "The cache {cacheName} did not have an entry for {url}."

    def __init__(self, url: str, cache_name: str) -> None:
        super().__init__({"url": url, "cacheName": cache_name})


class InvalidPrecacheEntryError(PrecacheError):
    """A manifest item has an unsupported shape or an unmatchable URL.

    Requests are matched on origin and path only, so entry URLs with a query
    string are rejected rather than kept as entries no request can reach.
    """

    code = "add-to-cache-list-unexpected-type"
    template = "Invalid precache entry {entry!r}: {reason}."

    def __init__(
        self,
        entry: Any,
        reason: str = "expected a URL string or an object with a 'url' and an optional 'revision'",
    ) -> None:
        super().__init__({"entry": entry, "reason": reason})


class ConflictingPrecacheEntriesError(PrecacheError):
    """The same URL was listed twice with different revisions."""

    code = "add-to-cache-list-conflicting-entries"
    template = (
        "Two precache entries for the same URL have different cache keys: "
        "{firstEntry} and {secondEntry}. Remove one of them."
    )

    def __init__(self, first_entry: str, second_entry: str) -> None:
        super().__init__({"firstEntry": first_entry, "secondEntry": second_entry})
