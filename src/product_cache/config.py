import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    redis_socket_timeout: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "0.5"))
    redis_connect_timeout: float = float(os.getenv("REDIS_CONNECT_TIMEOUT", "0.5"))

    # Cache
    cache_namespace: str = os.getenv("CACHE_NAMESPACE", "product")
    cache_ttl: int = int(os.getenv("CACHE_TTL", "600"))  # 10 minutes default
    cache_allow_null_values: bool = _env_bool("CACHE_ALLOW_NULL_VALUES", "false")
    cache_fail_open: bool = _env_bool("CACHE_FAIL_OPEN", "true")
    cache_backend: str = os.getenv("CACHE_BACKEND", "redis")  # or "memory"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = _env_bool("API_RELOAD", "true")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError(f"CACHE_TTL must be positive, got {self.cache_ttl}")

        if not self.cache_namespace:
            raise ValueError("CACHE_NAMESPACE must not be empty")

        if self.cache_backend not in ("redis", "memory"):
            raise ValueError(
                f"CACHE_BACKEND must be one of ['redis', 'memory'], got {self.cache_backend}"
            )

        if self.redis_socket_timeout <= 0 or self.redis_connect_timeout <= 0:
            raise ValueError("Redis timeouts must be positive so cache calls stay bounded")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance.

    Both timeouts are always set: a cache outage must surface as an error
    instead of blocking the caller.
    """
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_connect_timeout,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the application."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
