# Public helper API: extract the embedded catalog JSON from a rendered page
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, List


class HtmlCatalogExtractError(RuntimeError):
    """Raised when a page carries no readable embedded catalog."""


_ID_RE = re.compile(
    r'<script\b[^>]*\bid=["\']projects-data["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)
_TYPE_RE = re.compile(
    r'<script\b[^>]*\btype=["\']application/json(?:\s*;[^"\']*)?["\'][^>]*>(?P<body>.*?)</script>',
    flags=re.IGNORECASE | re.DOTALL,
)


def _first_list(pattern: re.Pattern, html_text: str) -> Any:
    for m in pattern.finditer(html_text):
        body = (m.group("body") or "").strip()
        if not body:
            continue
        try:
            obj = json.loads(body)
        except ValueError:
            continue
        if isinstance(obj, list):
            return obj
    return None


def extract_catalog_json_from_html_text(html_text: str) -> List[Any]:
    """Extract the catalog list from page HTML.

    Supported embeddings:
      1) Preferred: <script id="projects-data"> ...json... </script>
      2) Also:      any <script type="application/json[;...]"> holding a JSON list
    """
    for pat in (_ID_RE, _TYPE_RE):
        obj = _first_list(pat, html_text)
        if obj is not None:
            return obj
    raise HtmlCatalogExtractError("No <script type='application/json'> catalog block found in HTML.")


def extract_catalog_json_from_html_file(path: str | Path) -> List[Any]:
    p = Path(path)
    return extract_catalog_json_from_html_text(p.read_text(encoding="utf-8"))
