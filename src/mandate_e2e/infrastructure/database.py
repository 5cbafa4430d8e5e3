"""Redis connection used to persist global state between test modules."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional, Protocol

import redis


class HasStateRedisSettings(Protocol):
    state_redis_url: Optional[str]


class DatabaseClient:
    """Lazily connected Redis client."""

    def __init__(
        self,
        settings: HasStateRedisSettings,
        *,
        redis_client: Optional[redis.Redis] = None,
    ) -> None:
        self.settings = settings
        self._redis = redis_client

    def initialize_database(self) -> None:
        """Initialize Redis connection instance. No schema to create."""
        if not self.settings.state_redis_url:
            raise ValueError("state_redis_url is required for the Redis state store")
        # Expecting URL like: redis://host:port/0
        self._redis = redis.Redis.from_url(
            self.settings.state_redis_url, decode_responses=True
        )

    @contextmanager
    def get_connection(self) -> Iterator[redis.Redis]:
        """Yield a Redis connection."""
        if self._redis is None:
            self.initialize_database()
        assert self._redis is not None
        yield self._redis
