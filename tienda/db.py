"""
Storage Clients - Upstash Redis

Provides a singleton synchronous Upstash Redis client used as the durable
key-value slot for carts. The cart engine is synchronous, so only the sync
client is exposed.
"""

from typing import Optional

from upstash_redis import Redis

from tienda.config import get_settings


_redis_client: Optional[Redis] = None


def get_redis() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Uses standard Upstash env var names:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN
    """
    global _redis_client

    if _redis_client is None:
        settings = get_settings()
        if not settings.has_redis:
            raise ValueError("UPSTASH_REDIS_REST_URL and UPSTASH_REDIS_REST_TOKEN must be set")
        _redis_client = Redis(url=settings.redis_url, token=settings.redis_token)

    return _redis_client


class RedisKeys:
    """Redis key prefixes for different data types."""

    # Cart storage
    CART = "tienda:cart:"  # tienda:cart:{slot}

    @staticmethod
    def cart_key(slot: str) -> str:
        return f"{RedisKeys.CART}{slot}"
