from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol, runtime_checkable

Listener = Callable[[Any], None]


@runtime_checkable
class ElementTreePort(Protocol):
    """
    Minimal view of the shared visual-element tree.

    The runtime never renders or mutates elements; it only looks up module
    roots, walks parents, reads marker attributes and (un)registers native
    interaction listeners. Elements are opaque objects owned by the tree.
    """

    def query(self, selector: str) -> Optional[Any]:
        """First element in document order matching ``selector``, or None."""

    def query_all(self, selector: str) -> List[Any]:
        """All elements matching ``selector`` in document order."""

    def listen(self, element: Any, kind: str, listener: Listener) -> None:
        """Register a native listener for ``kind`` on ``element``."""

    def unlisten(self, element: Any, kind: str, listener: Listener) -> None:
        """Remove a listener previously registered with :meth:`listen`."""

    def parent(self, element: Any) -> Optional[Any]:
        """Parent element, or None at the root / for a detached element."""

    def has_attribute(self, element: Any, name: str) -> bool:
        """Whether ``element`` carries attribute ``name``."""

    def get_attribute(self, element: Any, name: str) -> Optional[str]:
        """Attribute value as a string, or None."""
