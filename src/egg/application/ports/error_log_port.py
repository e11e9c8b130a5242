from __future__ import annotations

from typing import Any, Dict, Iterable, Protocol, runtime_checkable


@runtime_checkable
class ErrorLogPort(Protocol):
    """
    Sink for ``'error'`` notifications raised by a runtime in production mode.

    Implementations may keep entries in memory, forward them to the Python
    logger, or ship them elsewhere.
    """

    def append(self, payload: Dict[str, Any]) -> None:
        """Record one ``'error'`` payload."""

    def entries(self) -> Iterable[Dict[str, Any]]:
        """Recorded entries, oldest first (may be empty for write-only sinks)."""

    def close(self) -> None:
        """Release underlying resources (optional)."""
