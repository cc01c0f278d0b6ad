# folio/modal.py
from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional

from .dom import Document, Element, Event
from .model import Project
from .mounts import ModalMounts
from .render.panels import render_modal_body


class ModalState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class ModalController:
    """Project detail dialog: content, open/close, and focus trap.

    Listeners on the close control and overlay are attached once; the
    document keydown handler is attached only while the dialog is open.
    """

    def __init__(
        self,
        document: Document,
        mounts: ModalMounts,
        *,
        announce: Optional[Callable[[str], None]] = None,
    ):
        self._doc = document
        self._m = mounts
        self._announce = announce
        self.state = ModalState.CLOSED
        self.current_project: Optional[Project] = None
        self._return_focus: Optional[Element] = None

        self._m.container.hidden = True
        self._m.close.add_listener("click", self._on_close_click)
        if self._m.overlay is not None:
            self._m.overlay.add_listener("click", self._on_close_click)
        else:
            self._m.container.add_listener("click", self._on_container_click)

    @property
    def is_open(self) -> bool:
        return self.state is ModalState.OPEN

    @property
    def previously_focused(self) -> Optional[Element]:
        return self._return_focus

    def open(self, project: Project) -> None:
        if not self.is_open:
            self._return_focus = self._doc.active_element

        self.current_project = project
        self._m.body.set_html(render_modal_body(project))
        self._m.container.hidden = False
        self._m.container.attrs["aria-hidden"] = "false"
        self._doc.scroll_locked = True
        self.state = ModalState.OPEN
        self._doc.add_listener("keydown", self.handle_keydown)
        self._m.close.focus()

        if self._announce is not None:
            self._announce(f"Project details for {project.title} opened")

    def close(self) -> None:
        if not self.is_open:
            return

        self.state = ModalState.CLOSED
        self._doc.remove_listener("keydown", self.handle_keydown)
        self._m.container.hidden = True
        self._m.container.attrs["aria-hidden"] = "true"
        self._doc.scroll_locked = False

        target = self._return_focus
        self._return_focus = None
        self.current_project = None
        if target is not None and target.is_connected:
            target.focus()
        elif self._m.container.contains(self._doc.active_element):
            self._doc.active_element = None

        if self._announce is not None:
            self._announce("Project details closed")

    def focusable_elements(self) -> List[Element]:
        return [el for el in self._m.container.descendants() if el.is_focusable]

    def handle_keydown(self, event: Event) -> None:
        if not self.is_open:
            return
        if event.key == "Escape":
            event.prevent_default()
            self.close()
        elif event.key == "Tab":
            self._trap_tab(event)

    def _trap_tab(self, event: Event) -> None:
        event.prevent_default()
        items = self.focusable_elements()
        if not items:
            return

        cur = self._doc.active_element
        if cur not in items:
            nxt = items[-1] if event.shift else items[0]
        else:
            i = items.index(cur)
            nxt = items[(i - 1) % len(items)] if event.shift else items[(i + 1) % len(items)]
        nxt.focus()

    def _on_close_click(self, event: Event) -> None:
        self.close()

    def _on_container_click(self, event: Event) -> None:
        if event.target is self._m.container:
            self.close()
