# folio/render/escape.py
from __future__ import annotations

import html
from typing import Any, Optional
from urllib.parse import urlsplit

_SAFE_SCHEMES = frozenset({"", "http", "https", "mailto"})


def esc(value: Any) -> str:
    """HTML-escape text for element content and quoted attributes."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def safe_url(url: Optional[str]) -> Optional[str]:
    """Return url when its scheme is safe to link to, else None."""
    if not url or not url.strip():
        return None
    u = url.strip()
    try:
        scheme = urlsplit(u).scheme.lower()
    except ValueError:
        return None
    if scheme not in _SAFE_SCHEMES:
        return None
    return u
