"""
Sandboxed context: the only surface a module implementation uses to reach
its runtime.

The sandbox is a capability boundary, not a security one. A context never
hands out the module registry, so a module cannot enumerate or stop its
peers, and every event it raises or listens to is namespaced under its own
name. A module that is given a raw dispatcher or store reference by other
means can still bypass this.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Tuple

from egg.core.data import Dictionary, GlobalsView
from egg.core.dispatcher import Dispatcher, EventKey
from egg.utils import utility

if TYPE_CHECKING:
    from egg.application.runtime import Runtime

logger = logging.getLogger(__name__)


class _ContextEvents:
    """``context.event``: listen/notify inside the module's namespace."""

    def __init__(self, context: "SandboxedContext"):
        self._context = context
        # (key, handler) pairs registered through this context
        self._subscriptions: List[Tuple[EventKey, Callable[[Any], Any]]] = []

    def key(self, event: str) -> EventKey:
        return EventKey(self._context.name, event)

    def listen(self, event: str, handler: Callable[[Any], Any]) -> None:
        key = self.key(event)
        self._context._runtime.event.listen(key, handler)
        self._subscriptions.append((key, handler))

    def notify(self, event: str, data: Any = None) -> None:
        self._context._runtime.event.notify(self.key(event), data)

    def unlisten(self, event: str, handler: Callable[[Any], Any]) -> None:
        key = self.key(event)
        self._context._runtime.event.unlisten(key, handler)
        try:
            self._subscriptions.remove((key, handler))
        except ValueError:
            pass

    def release(self) -> int:
        dispatcher = self._context._runtime.event
        released = len(self._subscriptions)
        for key, handler in self._subscriptions:
            dispatcher.unlisten(key, handler)
        self._subscriptions.clear()
        return released


class _ContextModules:
    """``context.module``: peer lookup, lazily starting the peer."""

    def __init__(self, context: "SandboxedContext"):
        self._context = context

    def get(self, name: str) -> Any:
        return self._context._runtime.module.get(name)


class _ContextLibraries:
    """``context.library``: another runtime's main module, nothing more."""

    def __init__(self, context: "SandboxedContext"):
        self._context = context

    def get(self, name: str) -> Any:
        directory = self._context._runtime.directory
        if directory is None:
            from egg.application.directory import RuntimeDirectory

            directory = RuntimeDirectory.instance()
        return directory.get(name).main


class SandboxedContext:
    def __init__(self, runtime: "Runtime", element: Optional[Any], name: str):
        self._runtime = runtime
        self._element = element
        self._name = name
        self.event = _ContextEvents(self)
        self.module = _ContextModules(self)
        self.library = _ContextLibraries(self)

    def error(self, exception: BaseException) -> None:
        """Raise in debug mode; otherwise publish an ``'error'`` notification."""
        self._runtime.report_error(exception, module=self._name)

    def release(self) -> int:
        """Drop every listener registered through this context."""
        released = self.event.release()
        if released:
            logger.debug(f"released {released} listener(s) of module {self._name}")
        return released

    # ------------------ read-only accessors ------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def element(self) -> Optional[Any]:
        return self._element

    @property
    def globals(self) -> GlobalsView:
        return GlobalsView(self._runtime.globals)

    @property
    def utility(self):
        return utility

    @property
    def dispatcher(self) -> type[Dispatcher]:
        return Dispatcher

    @property
    def dictionary(self) -> type[Dictionary]:
        return Dictionary

    @property
    def dom(self) -> Optional[Any]:
        return self._runtime.document

    def __repr__(self) -> str:
        return f"SandboxedContext(module={self._name!r}, runtime={self._runtime.name!r})"
