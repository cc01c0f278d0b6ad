# folio/dom.py
"""Minimal in-memory document model.

The controllers talk to mount points through this module only: elements with
attributes, ordered content (child elements and text runs), a `hidden` flag,
listeners with bubbling dispatch, and a document-level focus pointer. Markup
assigned via `Element.set_html` is parsed with BeautifulSoup so rendered
fragments become real, queryable elements (buttons, links, inputs) that can
receive focus and events.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

_FOCUSABLE_TAGS = frozenset({"button", "input", "select", "textarea"})


@dataclass
class Event:
    type: str
    key: str = ""
    shift: bool = False
    target: Optional["Element"] = None
    current_target: Optional[object] = None
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


Listener = Callable[[Event], None]


class _EventTarget:
    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def add_listener(self, type_: str, fn: Listener) -> None:
        fns = self._listeners.setdefault(type_, [])
        if fn not in fns:
            fns.append(fn)

    def remove_listener(self, type_: str, fn: Listener) -> None:
        fns = self._listeners.get(type_)
        if fns and fn in fns:
            fns.remove(fn)

    def listener_count(self, type_: str) -> int:
        return len(self._listeners.get(type_, ()))

    def _fire(self, event: Event) -> None:
        event.current_target = self
        for fn in list(self._listeners.get(event.type, ())):
            fn(event)


Node = Union["Element", str]


class Element(_EventTarget):
    def __init__(self, tag: str, attrs: Optional[Dict[str, str]] = None, document: Optional["Document"] = None):
        super().__init__()
        self.tag = tag.lower()
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.parent: Optional[Element] = None
        self.document = document
        self.value = self.attrs.get("value", "")
        # child elements and text runs, in document order
        self._content: List[Node] = []

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        cls = "".join(f".{c}" for c in self.classes)
        return f"<Element {self.tag}{ident}{cls}>"

    # --- attributes ---------------------------------------------------------

    @property
    def id(self) -> Optional[str]:
        return self.attrs.get("id")

    @property
    def classes(self) -> List[str]:
        return (self.attrs.get("class") or "").split()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def toggle_class(self, name: str, on: bool) -> None:
        cur = [c for c in self.classes if c != name]
        if on:
            cur.append(name)
        self.attrs["class"] = " ".join(cur)

    @property
    def hidden(self) -> bool:
        return "hidden" in self.attrs

    @hidden.setter
    def hidden(self, value: bool) -> None:
        if value:
            self.attrs["hidden"] = ""
        else:
            self.attrs.pop("hidden", None)

    @property
    def disabled(self) -> bool:
        return "disabled" in self.attrs

    # --- tree ---------------------------------------------------------------

    @property
    def children(self) -> List["Element"]:
        return [n for n in self._content if isinstance(n, Element)]

    @property
    def text(self) -> str:
        """Text directly inside this element (not in descendants)."""
        return "".join(n for n in self._content if isinstance(n, str))

    @text.setter
    def text(self, value: str) -> None:
        self.clear()
        if value:
            self._content.append(str(value))

    def append(self, child: "Element") -> "Element":
        if child.parent is not None:
            child.remove()
        child.parent = self
        child._adopt(self.document)
        self._content.append(child)
        return child

    def append_text(self, text: str) -> None:
        if text:
            self._content.append(text)

    def _adopt(self, document: Optional["Document"]) -> None:
        self.document = document
        for c in self.children:
            c._adopt(document)

    def remove(self) -> None:
        if self.parent is not None:
            content = self.parent._content
            for i, n in enumerate(content):
                if n is self:
                    del content[i]
                    break
            self.parent = None

    def clear(self) -> None:
        for c in self.children:
            c.parent = None
        self._content = []

    def set_html(self, markup: str) -> None:
        """Replace content with the nodes parsed from markup."""
        self.clear()
        soup = BeautifulSoup(markup or "", "html.parser")
        _build(self, soup)

    def iter(self) -> Iterator["Element"]:
        yield self
        for c in self.children:
            yield from c.iter()

    def descendants(self) -> Iterator["Element"]:
        it = self.iter()
        next(it)
        yield from it

    def get_by_id(self, id_: str) -> Optional["Element"]:
        for el in self.iter():
            if el.id == id_:
                return el
        return None

    def query_class(self, name: str) -> Optional["Element"]:
        for el in self.descendants():
            if el.has_class(name):
                return el
        return None

    def query_class_all(self, name: str) -> List["Element"]:
        return [el for el in self.descendants() if el.has_class(name)]

    def query_tag_all(self, tag: str) -> List["Element"]:
        tag = tag.lower()
        return [el for el in self.descendants() if el.tag == tag]

    def contains(self, other: Optional["Element"]) -> bool:
        cur = other
        while cur is not None:
            if cur is self:
                return True
            cur = cur.parent
        return False

    @property
    def is_connected(self) -> bool:
        if self.document is None:
            return False
        return self.document.root.contains(self)

    @property
    def text_content(self) -> str:
        return "".join(n if isinstance(n, str) else n.text_content for n in self._content)

    # --- focus & events -----------------------------------------------------

    @property
    def is_focusable(self) -> bool:
        if self.hidden or self.disabled:
            return False
        tabindex = self.attrs.get("tabindex")
        if tabindex is not None:
            return tabindex.strip() != "-1"
        if self.tag in _FOCUSABLE_TAGS:
            return True
        return "href" in self.attrs

    def focus(self) -> None:
        if self.document is not None and self.is_connected:
            self.document.active_element = self

    def dispatch(self, event: Event) -> Event:
        """Fire event here, then on each ancestor, then on the document."""
        if event.target is None:
            event.target = self
        node: Optional[Element] = self
        while node is not None and not event.propagation_stopped:
            node._fire(event)
            node = node.parent
        if self.document is not None and not event.propagation_stopped and self.is_connected:
            self.document._fire(event)
        return event

    def click(self) -> Event:
        return self.dispatch(Event("click"))

    def type_text(self, value: str) -> Event:
        self.value = value
        return self.dispatch(Event("input"))


class Document(_EventTarget):
    def __init__(self) -> None:
        super().__init__()
        self.root = Element("#document", document=self)
        self.body = self.root.append(Element("body", document=self))
        self.active_element: Optional[Element] = None
        self.scroll_locked = False
        self.clipboard = ""

    @classmethod
    def from_html(cls, markup: str) -> "Document":
        doc = cls()
        doc.root.clear()
        doc.root.set_html(markup)
        body = next((el for el in doc.root.descendants() if el.tag == "body"), None)
        if body is None:
            body = Element("body", document=doc)
            for c in doc.root.children:
                body.append(c)
            doc.root.append(body)
        doc.body = body
        return doc

    @property
    def document_element(self) -> Element:
        kids = self.root.children
        return kids[0] if kids else self.body

    def get_element_by_id(self, id_: str) -> Optional[Element]:
        return self.root.get_by_id(id_)

    def query_class(self, name: str) -> Optional[Element]:
        return self.root.query_class(name)

    @property
    def focused(self) -> Element:
        el = self.active_element
        if el is not None and el.is_connected:
            return el
        return self.body

    def create_element(self, tag: str, attrs: Optional[Dict[str, str]] = None) -> Element:
        return Element(tag, attrs, document=self)

    def press(self, key: str, *, shift: bool = False) -> Event:
        """Dispatch a keydown at the focused element."""
        return self.focused.dispatch(Event("keydown", key=key, shift=shift))

    def write_clipboard(self, text: str) -> None:
        self.clipboard = str(text)


def _attr_value(v: object) -> str:
    # bs4 hands multi-valued attributes (class, rel) back as lists
    if isinstance(v, (list, tuple)):
        return " ".join(str(x) for x in v)
    return "" if v is None else str(v)


def _build(parent: Element, node: Tag) -> None:
    for child in node.children:
        if isinstance(child, Tag):
            attrs = {k: _attr_value(v) for k, v in child.attrs.items()}
            el = parent.append(Element(child.name, attrs, document=parent.document))
            _build(el, child)
        elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            parent.append_text(str(child))


__all__ = [
    "Document",
    "Element",
    "Event",
    "Listener",
]
