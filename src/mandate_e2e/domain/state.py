"""Run-scoped key/value state shared by every step of a test module."""

from __future__ import annotations

from typing import Any, Optional

from .errors import MissingStateError


class GlobalState:
    """Mutable bag of identifiers produced by one step and consumed by later ones.

    The wrapped dict is shared by reference: ``data`` returns the live mapping,
    so whatever a call test sets is visible to the next step and is what gets
    flushed back to the store.
    """

    def __init__(self, data: Optional[dict[str, Any]] = None) -> None:
        self._data: dict[str, Any] = data if data is not None else {}

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def require(self, key: str) -> Any:
        """Return the value for ``key`` or raise ``MissingStateError``."""
        value = self._data.get(key)
        if value is None:
            raise MissingStateError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"GlobalState({sorted(self._data)!r})"
