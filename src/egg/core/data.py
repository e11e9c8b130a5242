"""
Key/value containers used for the global store and the runtime directory.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List

from .errors import MissingNameError, UnknownNameError

_MISSING = object()


class Dictionary:
    """
    Associative array: each key appears at most once.

    ``get`` refuses falsy keys (``None``, ``""``, ``0``) instead of silently
    returning nothing; absent keys return ``default``. Use :meth:`require`
    when absence is an error.
    """

    def __init__(self) -> None:
        self._store: Dict[Hashable, Any] = {}

    @classmethod
    def create(cls) -> "Dictionary":
        return cls()

    def add(self, key: Hashable, value: Any) -> Any:
        self._store[key] = value
        return value

    def update(self, key: Hashable, value: Any) -> Any:
        self._store[key] = value
        return value

    def get(self, key: Hashable, default: Any = None) -> Any:
        if not key:
            raise MissingNameError(message=f"Dictionary key is not valid: {key!r}")
        return self._store.get(key, default)

    def require(self, key: Hashable) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise UnknownNameError(message=f"Key {key!r} has not been added.")
        return value

    def has(self, key: Hashable) -> bool:
        return key in self._store

    def remove(self, key: Hashable) -> None:
        self._store.pop(key, None)

    def count(self) -> int:
        return len(self._store)

    def clear(self) -> None:
        self._store.clear()

    def list(self) -> List[Any]:
        return list(self._store.values())

    def keys(self) -> List[Hashable]:
        return list(self._store.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._store))

    def __len__(self) -> int:
        return len(self._store)


class GlobalsView:
    """Read-only face of a :class:`Dictionary`, handed to module contexts."""

    def __init__(self, store: Dictionary) -> None:
        self._store = store

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._store.get(key, default)

    def has(self, key: Hashable) -> bool:
        return self._store.has(key)

    def count(self) -> int:
        return self._store.count()

    def list(self) -> List[Any]:
        return self._store.list()

    def keys(self) -> List[Hashable]:
        return self._store.keys()
