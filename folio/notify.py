# folio/notify.py
from __future__ import annotations

import time
from collections import deque
from typing import Callable, Deque, Optional

from .dom import Document, Element

DEFAULT_TOAST_MS = 3000
ANNOUNCE_HISTORY = 20


class Announcer:
    """Polite screen-reader announcements via one reused live-region element.

    Each message replaces the previous one; `history` keeps the most recent few.
    """

    def __init__(self, document: Document):
        self._document = document
        self._region: Optional[Element] = None
        self.history: Deque[str] = deque(maxlen=ANNOUNCE_HISTORY)

    @property
    def region(self) -> Optional[Element]:
        return self._region

    def __call__(self, message: str) -> None:
        region = self._region
        if region is None or not region.is_connected:
            region = self._document.create_element("div", {"aria-live": "polite", "class": "sr-only"})
            self._document.body.append(region)
            self._region = region
        region.text = message
        self.history.append(message)


class Toast:
    """Transient status message bound to the toast mount point.

    There is no timer loop here; `expire()` hides the toast once its duration
    has elapsed on the given clock.
    """

    def __init__(
        self,
        element: Optional[Element],
        message_el: Optional[Element] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._el = element
        self._msg = message_el or element
        self._clock = clock
        self._deadline: Optional[float] = None
        self.message = ""

    @property
    def visible(self) -> bool:
        return self._el is not None and not self._el.hidden

    def show(self, message: str, duration_ms: int = DEFAULT_TOAST_MS) -> None:
        self.message = message
        self._deadline = self._clock() + duration_ms / 1000.0
        if self._el is None:
            return
        if self._msg is not None:
            self._msg.clear()
            self._msg.text = message
        self._el.hidden = False
        self._el.attrs["data-visible"] = "true"

    def hide(self) -> None:
        self._deadline = None
        if self._el is None:
            return
        self._el.attrs["data-visible"] = "false"
        self._el.hidden = True

    def expire(self) -> bool:
        if self._deadline is not None and self._clock() >= self._deadline:
            self.hide()
            return True
        return False
