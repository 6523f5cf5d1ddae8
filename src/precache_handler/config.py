import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

from precache_handler.urls import get_precache_name

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Precache
    origin: str = os.getenv("PRECACHE_ORIGIN", "http://localhost:8000")
    scope: str = os.getenv("PRECACHE_SCOPE", "/")
    manifest_path: str | None = os.getenv("PRECACHE_MANIFEST")
    fallback_to_network: bool = _env_flag("FALLBACK_TO_NETWORK", "true")
    directory_index: str = os.getenv("PRECACHE_DIRECTORY_INDEX", "index.html")
    clean_urls: bool = _env_flag("PRECACHE_CLEAN_URLS", "true")

    # Cache naming: <prefix>-precache-v2-<suffix>, suffix defaults to origin + scope
    cache_name_prefix: str = os.getenv("CACHE_NAME_PREFIX", "workbox")
    cache_name_suffix: str | None = os.getenv("CACHE_NAME_SUFFIX")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Network
    fetch_timeout: float = float(os.getenv("FETCH_TIMEOUT", "30.0"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = _env_flag("API_RELOAD", "true")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def scope_url(self) -> str:
        """Origin joined with the scope path, e.g. ``http://localhost:8000/app/``."""
        scope = self.scope if self.scope.startswith("/") else f"/{self.scope}"
        return f"{self.origin.rstrip('/')}{scope}"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.origin.startswith(("http://", "https://")):
            raise ValueError(f"PRECACHE_ORIGIN must be an http(s) origin, got {self.origin!r}")

        if self.fetch_timeout <= 0:
            raise ValueError("FETCH_TIMEOUT must be positive")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {self.log_level!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_redis_client() -> redis.Redis:
    """Create an async Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )


def get_default_cache_name() -> str:
    """Precache namespace for the configured origin and scope."""
    suffix = settings.cache_name_suffix if settings.cache_name_suffix is not None else settings.scope_url
    return get_precache_name(settings.cache_name_prefix, suffix)
