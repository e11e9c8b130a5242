"""
BeautifulSoup-backed element tree.

Parses an HTML page once and serves as the runtime's shared visual tree:
CSS queries go through soupsieve, and synthetic interaction events can be
dispatched at any element; they bubble from the target up to the document
root, invoking the listeners registered on each element along the way.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from bs4 import BeautifulSoup
from bs4.element import Tag


Listener = Callable[[Any], None]


@dataclass
class InteractionEvent:
    """A native interaction as seen by element listeners."""

    kind: str
    target: Optional[Tag]
    current_target: Optional[Tag] = None
    detail: Dict[str, Any] = field(default_factory=dict)
    propagation_stopped: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class SoupDocument:
    def __init__(self, markup: Union[str, BeautifulSoup] = "", parser: str = "html.parser"):
        self.soup = markup if isinstance(markup, BeautifulSoup) else BeautifulSoup(markup, parser)
        # keyed by id(): Tag.__eq__ compares markup, not identity
        self._listeners: Dict[int, Tuple[Tag, Dict[str, List[Listener]]]] = {}

    @classmethod
    def from_file(cls, path: Union[str, Path], parser: str = "html.parser") -> "SoupDocument":
        return cls(Path(path).read_text(encoding="utf-8"), parser)

    # ------------------ queries ------------------

    def query(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def query_all(self, selector: str) -> List[Tag]:
        return list(self.soup.select(selector))

    def parent(self, element: Any) -> Optional[Tag]:
        parent = getattr(element, "parent", None)
        # the BeautifulSoup object itself is the document, not an element
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return parent

    def has_attribute(self, element: Any, name: str) -> bool:
        return isinstance(element, Tag) and element.has_attr(name)

    def get_attribute(self, element: Any, name: str) -> Optional[str]:
        if not isinstance(element, Tag):
            return None
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    # ------------------ listeners ------------------

    def listen(self, element: Tag, kind: str, listener: Listener) -> None:
        entry = self._listeners.get(id(element))
        if entry is None or entry[0] is not element:
            entry = (element, defaultdict(list))
            self._listeners[id(element)] = entry
        entry[1][kind].append(listener)

    def unlisten(self, element: Tag, kind: str, listener: Listener) -> None:
        entry = self._listeners.get(id(element))
        if entry is None or entry[0] is not element:
            return
        listeners = entry[1].get(kind)
        if not listeners:
            return
        try:
            listeners.remove(listener)
        except ValueError:
            return
        if not listeners:
            del entry[1][kind]
        if not entry[1]:
            del self._listeners[id(element)]

    def listener_count(self, element: Tag, kind: Optional[str] = None) -> int:
        entry = self._listeners.get(id(element))
        if entry is None or entry[0] is not element:
            return 0
        if kind is not None:
            return len(entry[1].get(kind, ()))
        return sum(len(items) for items in entry[1].values())

    # ------------------ dispatch ------------------

    def dispatch(self, target: Tag, kind: str, **detail: Any) -> InteractionEvent:
        """Fire ``kind`` at ``target`` and bubble it up to the root."""
        event = InteractionEvent(kind=kind, target=target, detail=detail)
        node: Optional[Tag] = target
        while node is not None and not event.propagation_stopped:
            entry = self._listeners.get(id(node))
            if entry is not None and entry[0] is node:
                event.current_target = node
                for listener in list(entry[1].get(kind, ())):
                    listener(event)
            node = self.parent(node)
        event.current_target = None
        return event

    def dispatch_at(self, selector: str, kind: str, **detail: Any) -> InteractionEvent:
        target = self.query(selector)
        if target is None:
            raise LookupError(f"No element matches {selector!r}")
        return self.dispatch(target, kind, **detail)
