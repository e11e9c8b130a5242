from __future__ import annotations

from typing import Any, Dict, Iterable, List

from egg.application.ports import ErrorLogPort


class InMemoryErrorLog(ErrorLogPort):
    """Simple in-memory error log (useful for tests/evals)."""

    def __init__(self) -> None:
        self.errors: List[Dict[str, Any]] = []

    def append(self, payload: Dict[str, Any]) -> None:
        self.errors.append(dict(payload))

    def entries(self) -> Iterable[Dict[str, Any]]:
        return iter(list(self.errors))

    def for_module(self, module: str) -> List[Dict[str, Any]]:
        return [e for e in self.errors if e.get("module") == module]

    def close(self) -> None:
        return None
