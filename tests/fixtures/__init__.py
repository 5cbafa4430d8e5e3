"""Test fixtures for in-memory implementations."""

from .fake_gateway import FakeGateway, build_app
from .in_memory_storage import FakeRedis, InMemoryStateStore

__all__ = [
    "FakeGateway",
    "FakeRedis",
    "InMemoryStateStore",
    "build_app",
]
