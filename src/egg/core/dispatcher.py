"""
In-process publish/subscribe bus shared by every module of one runtime.

Notification is synchronous and unguarded: handlers run in subscription
order on the caller's turn, and an exception raised by a handler propagates
to whoever called :meth:`Dispatcher.notify`.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, Hashable, List, NamedTuple

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]


class EventKey(NamedTuple):
    """Namespaced event name: ``(module, name)``.

    Keys are compared structurally, so a module named ``"a-b"`` listening to
    ``"c"`` never collides with module ``"a"`` listening to ``"b-c"``.
    """

    module: str
    name: str

    def __str__(self) -> str:
        return f"{self.module}-{self.name}"


class Dispatcher:
    """Event name -> ordered list of handlers."""

    def __init__(self) -> None:
        self._listeners: Dict[Hashable, List[Handler]] = defaultdict(list)

    @classmethod
    def create(cls) -> "Dispatcher":
        return cls()

    def listen(self, event: Hashable, handler: Handler) -> None:
        """Register ``handler`` for ``event``. Duplicates are kept."""
        self._listeners[event].append(handler)
        logger.debug(f"listen: {event} -> {getattr(handler, '__name__', repr(handler))}")

    def notify(self, event: Hashable, data: Any = None) -> None:
        """Invoke every handler currently registered for ``event`` with ``data``."""
        handlers = self._listeners.get(event)
        if not handlers:
            return
        # snapshot: handlers may (un)subscribe while we iterate
        for handler in list(handlers):
            handler(data)

    def unlisten(self, event: Hashable, handler: Handler) -> None:
        """Remove the first registration of ``handler``; no-op when absent."""
        handlers = self._listeners.get(event)
        if not handlers:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            return
        if not handlers:
            del self._listeners[event]
        logger.debug(f"unlisten: {event} -> {getattr(handler, '__name__', repr(handler))}")

    def has_listeners(self, event: Hashable) -> bool:
        return bool(self._listeners.get(event))

    def listener_count(self, event: Hashable) -> int:
        return len(self._listeners.get(event, ()))

    def events(self) -> List[Hashable]:
        return [event for event, handlers in self._listeners.items() if handlers]

    def clear(self) -> int:
        count = sum(len(handlers) for handlers in self._listeners.values())
        self._listeners.clear()
        return count
