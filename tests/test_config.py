"""
Tests for settings and error payloads.
"""

import pytest

from precache_handler.config import Settings
from precache_handler.exceptions import MissingPrecacheEntryError, PrecacheError


def test_scope_url():
    assert Settings(origin="https://example.com", scope="/app/").scope_url == "https://example.com/app/"
    assert Settings(origin="https://example.com/", scope="sw/").scope_url == "https://example.com/sw/"


def test_invalid_origin_is_rejected():
    with pytest.raises(ValueError, match="PRECACHE_ORIGIN"):
        Settings(origin="example.com")


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(log_level="chatty")


def test_missing_precache_entry_error_payload():
    error = MissingPrecacheEntryError(url="https://example.com/a.js", cache_name="workbox-precache-v2-https://example.com/")

    assert isinstance(error, PrecacheError)
    assert error.code == "missing-precache-entry"
    assert error.details == {"url": "https://example.com/a.js", "cacheName": "workbox-precache-v2-https://example.com/"}
    assert "https://example.com/a.js" in error.message
