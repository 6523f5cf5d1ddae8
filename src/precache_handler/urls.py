"""URL helpers shared by the resolver, the service and the handler.

Cache keys are part of the storage contract: a response stored under
``/app.js?__WB_REVISION__=abc123`` must be found again by any reader, so
``create_cache_key`` must stay byte-for-byte stable.
"""

from collections.abc import Iterator
from urllib.parse import parse_qsl, urldefrag, urlencode, urljoin, urlsplit, urlunsplit

import httpx

REVISION_SEARCH_PARAM = "__WB_REVISION__"
PRECACHE_CACHE_ID = "precache-v2"


def canonical_url(url: str) -> str:
    """Percent-encode ``url`` the way httpx does for outgoing requests.

    Entries and incoming requests both pass through here, so ``/hello world.html``
    and ``/hello%20world.html`` compare equal. Existing escapes are kept.
    """
    return str(httpx.URL(url))


def resolve_url(url: str, base: str) -> str:
    """Make ``url`` absolute against ``base``, drop any fragment and canonicalize it."""
    absolute, _fragment = urldefrag(urljoin(base, url))
    return canonical_url(absolute)


def normalize_url(url: str, base: str) -> str:
    """Reduce a request URL to the origin and path used for entry matching.

    Query string and fragment are removed.
    """
    parts = urlsplit(urljoin(base, url))
    return canonical_url(urlunsplit(parts._replace(query="", fragment="")))


def create_cache_key(url: str, revision: str | None) -> str:
    """Derive the storage key for a precache entry.

    Without a revision the key is the URL itself. With one, the revision is
    set as the ``__WB_REVISION__`` query parameter. An existing query is
    re-serialized in form encoding (``%20`` becomes ``+``) and a previous
    revision parameter is replaced in place.
    """
    if not revision:
        return url

    parts = urlsplit(url)
    params: list[tuple[str, str]] = []
    replaced = False
    for name, value in parse_qsl(parts.query, keep_blank_values=True):
        if name != REVISION_SEARCH_PARAM:
            params.append((name, value))
        elif not replaced:
            params.append((name, revision))
            replaced = True
    if not replaced:
        params.append((REVISION_SEARCH_PARAM, revision))
    return urlunsplit(parts._replace(query=urlencode(params)))


def get_precache_name(prefix: str = "workbox", suffix: str = "") -> str:
    """Build the precache namespace, e.g. ``workbox-precache-v2-https://example.com/``.

    Empty parts are skipped so a blank prefix or suffix leaves no stray dash.
    """
    return "-".join(part for part in (prefix, PRECACHE_CACHE_ID, suffix) if part)


def generate_url_variations(
    url: str,
    directory_index: str | None = "index.html",
    clean_urls: bool = True,
) -> Iterator[str]:
    """Yield the candidate URLs a normalized request URL may be precached under.

    Order: the URL itself, then ``<dir>/index.html`` for directory URLs, then
    ``<path>.html`` for extension-less clean URLs.
    """
    yield url

    parts = urlsplit(url)
    if directory_index and parts.path.endswith("/"):
        yield urlunsplit(parts._replace(path=parts.path + directory_index))

    if clean_urls and parts.path and not parts.path.endswith("/"):
        yield urlunsplit(parts._replace(path=parts.path + ".html"))
