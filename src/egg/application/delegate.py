"""
Interaction delegation: one native listener per interaction kind on a
module's root element, re-emitted as namespaced dispatcher notifications.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from egg.application.ports import ElementTreePort, Listener
from egg.core.dispatcher import Dispatcher, EventKey
from egg.core.errors import annotate_module_error

logger = logging.getLogger(__name__)

MODULE_ATTRIBUTE = "data-module"
TYPE_ATTRIBUTE = "data-type"


class InteractionKind(str, Enum):
    """Closed set of interaction kinds a module can subscribe to."""

    click = "click"
    mousemove = "mousemove"
    mouseover = "mouseover"
    mouseout = "mouseout"
    mousedown = "mousedown"
    mouseup = "mouseup"
    mouseenter = "mouseenter"
    mouseleave = "mouseleave"
    keydown = "keydown"
    keypress = "keypress"
    keyup = "keyup"
    submit = "submit"
    change = "change"
    contextmenu = "contextmenu"
    dblclick = "dblclick"
    input = "input"
    focusin = "focusin"
    focusout = "focusout"


INTERACTION_KINDS = tuple(kind.value for kind in InteractionKind)


@dataclass
class DelegatedEvent:
    """
    What module subscribers receive for an interaction.

    ``event`` is the raw interaction event from the tree; ``element`` is the
    nearest ancestor of its target (inclusive) carrying the type marker, or
    None when the walk reached the module boundary or a detached node.
    """

    module: str
    kind: str
    event: Any
    element: Optional[Any] = None
    element_type: str = ""


class InteractionDelegate:
    """Manages interaction listeners for a single module root element."""

    def __init__(
        self,
        element: Any,
        handler: Dispatcher,
        name: str,
        tree: ElementTreePort,
        *,
        module_attribute: str = MODULE_ATTRIBUTE,
        type_attribute: str = TYPE_ATTRIBUTE,
        on_error: Optional[Callable[[BaseException], None]] = None,
    ):
        self.element = element
        self.name = name
        self._handler = handler
        self._tree = tree
        self._module_attribute = module_attribute
        self._type_attribute = type_attribute
        self._on_error = on_error
        # kind -> listener actually registered on the element
        self._bound: Dict[str, Listener] = {}
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    @property
    def bound_kinds(self) -> tuple[str, ...]:
        return tuple(self._bound)

    # ------------------ element resolution ------------------

    def _is_module_element(self, element: Any) -> bool:
        return element is not None and self._tree.has_attribute(element, self._module_attribute)

    def _is_type_element(self, element: Any) -> bool:
        return element is not None and self._tree.has_attribute(element, self._type_attribute)

    def nearest_type_element(self, element: Any) -> Optional[Any]:
        """Closest ancestor (inclusive) with the type marker, bounded by the module element."""
        found = self._is_type_element(element)
        # a listener may detach nodes before the walk runs; parent() is None then
        while not found and element is not None and not self._is_module_element(element):
            element = self._tree.parent(element)
            found = self._is_type_element(element)
        return element if found else None

    # ------------------ dispatch ------------------

    def _handle_event(self, kind: str, event: Any) -> None:
        target = self.nearest_type_element(getattr(event, "target", None))
        element_type = ""
        if target is not None:
            element_type = self._tree.get_attribute(target, self._type_attribute) or ""
        payload = DelegatedEvent(
            module=self.name,
            kind=kind,
            event=event,
            element=target,
            element_type=element_type,
        )
        try:
            self._handler.notify(EventKey(self.name, kind), payload)
        except Exception as exc:
            if self._on_error is None:
                raise
            annotate_module_error(exc, self.name, f"on{kind}")
            self._on_error(exc)

    def _make_listener(self, kind: str) -> Listener:
        def listener(event: Any) -> None:
            self._handle_event(kind, event)

        listener.__name__ = f"{self.name}_on{kind}"
        return listener

    def attach_events(self) -> None:
        """Listen for every kind that has at least one subscriber. Idempotent."""
        if self._attached:
            return
        for kind in INTERACTION_KINDS:
            if not self._handler.has_listeners(EventKey(self.name, kind)):
                continue
            listener = self._make_listener(kind)
            self._tree.listen(self.element, kind, listener)
            self._bound[kind] = listener
        self._attached = True
        logger.debug(f"delegate attached: {self.name} kinds={list(self._bound)}")

    def detach_events(self) -> None:
        """Remove every native listener registered by :meth:`attach_events`."""
        for kind, listener in self._bound.items():
            self._tree.unlisten(self.element, kind, listener)
        self._bound.clear()
        self._attached = False
        logger.debug(f"delegate detached: {self.name}")
