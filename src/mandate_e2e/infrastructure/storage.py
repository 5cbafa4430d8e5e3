"""Persistent stores that seed and receive the global state of a test module."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Union

import redis

from ..domain.errors import StateStoreError
from ..env import Settings
from .database import DatabaseClient

logger = logging.getLogger(__name__)


class StateStore(ABC):
    """Load/save pair bracketing a test module (seed before, flush after)."""

    @abstractmethod
    def load(self) -> dict[str, Any]:
        pass

    @abstractmethod
    def save(self, data: dict[str, Any]) -> None:
        pass


class JsonFileStateStore(StateStore):
    """Global state kept as a JSON object in a local file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as e:
            raise StateStoreError(f"State file {self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StateStoreError(f"State file {self._path} must hold a JSON object")
        logger.info("Loaded %d state keys from %s", len(data), self._path)
        return data

    def save(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # Write to a sibling temp file and swap it in so readers never see half a file
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", dir=str(self._path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, sort_keys=True, default=str)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info("Flushed %d state keys to %s", len(data), self._path)


class RedisStateStore(StateStore):
    """Global state kept as a JSON document under a single Redis key."""

    def __init__(self, db_client: DatabaseClient, key: str) -> None:
        self._db_client = db_client
        self._key = key

    def load(self) -> dict[str, Any]:
        try:
            with self._db_client.get_connection() as conn:
                raw = conn.get(self._key)
        except redis.RedisError as e:
            raise StateStoreError(f"Could not read state key {self._key!r}: {e}") from e
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StateStoreError(f"State key {self._key!r} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StateStoreError(f"State key {self._key!r} must hold a JSON object")
        logger.info("Loaded %d state keys from redis key %s", len(data), self._key)
        return data

    def save(self, data: dict[str, Any]) -> None:
        payload = json.dumps(data, sort_keys=True, default=str)
        try:
            with self._db_client.get_connection() as conn:
                conn.set(self._key, payload)
        except redis.RedisError as e:
            raise StateStoreError(f"Could not write state key {self._key!r}: {e}") from e
        logger.info("Flushed %d state keys to redis key %s", len(data), self._key)


def build_state_store(settings: Settings) -> StateStore:
    """Pick the Redis store when a state Redis URL is configured, else the JSON file."""
    if settings.state_redis_url:
        return RedisStateStore(DatabaseClient(settings), settings.state_key)
    return JsonFileStateStore(settings.state_path)
