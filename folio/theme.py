# folio/theme.py
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .dom import Element
from .util.console import eprint

THEME_KEY = "theme"
LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)


def default_state_path() -> Path:
    base = (os.getenv("FOLIO_STATE_DIR", "") or "").strip()
    root = Path(base).expanduser() if base else Path.home() / ".folio"
    return root / "state.json"


class LocalStore:
    """Small persistent key-value store backed by one JSON file.

    path=None keeps everything in memory. Unreadable or corrupt files read
    as empty; write failures are reported and otherwise ignored, matching how
    browser storage behaves when it is unavailable.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else None
        self._mem: Dict[str, str] = {}

    def _read(self) -> Dict[str, Any]:
        if self.path is None:
            return dict(self._mem)
        try:
            obj = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            eprint(f"[folio.theme] WARN: ignoring unreadable state file {self.path}: {e}")
            return {}
        return obj if isinstance(obj, dict) else {}

    def get(self, key: str) -> Optional[str]:
        v = self._read().get(key)
        return v if isinstance(v, str) else None

    def set(self, key: str, value: str) -> None:
        if self.path is None:
            self._mem[key] = str(value)
            return
        data = self._read()
        data[key] = str(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        except OSError as e:
            eprint(f"[folio.theme] WARN: could not persist {key!r} to {self.path}: {e}")


class ThemeController:
    def __init__(
        self,
        store: LocalStore,
        root: Element,
        *,
        toggle: Optional[Element] = None,
        prefers_dark: bool = False,
        announce: Optional[Callable[[str], None]] = None,
    ):
        self._store = store
        self._root = root
        self._toggle = toggle
        self._prefers_dark = prefers_dark
        self._announce = announce
        self.theme = LIGHT

        if self._toggle is not None:
            self._toggle.add_listener("click", lambda event: self.toggle())

    def saved_theme(self) -> Optional[str]:
        v = self._store.get(THEME_KEY)
        return v if v in THEMES else None

    def init(self) -> str:
        """Apply the saved theme, or the system preference when none is saved."""
        self._apply(self.saved_theme() or (DARK if self._prefers_dark else LIGHT))
        return self.theme

    def toggle(self) -> str:
        new = LIGHT if self.theme == DARK else DARK
        self._store.set(THEME_KEY, new)
        self._apply(new)
        if self._announce is not None:
            self._announce(f"Switched to {new} mode")
        return new

    def system_changed(self, prefers_dark: bool) -> None:
        self._prefers_dark = prefers_dark
        if self.saved_theme() is None:
            self._apply(DARK if prefers_dark else LIGHT)

    def _apply(self, theme: str) -> None:
        self.theme = theme
        self._root.attrs["data-theme"] = theme
        if self._toggle is not None:
            dark = theme == DARK
            self._toggle.attrs["aria-pressed"] = "true" if dark else "false"
            self._toggle.attrs["aria-label"] = "Switch to light theme" if dark else "Switch to dark theme"
