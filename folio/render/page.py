# folio/render/page.py
from __future__ import annotations

import json
import re
from typing import Optional, Sequence

from ..catalog import tags_universe
from ..filters import apply
from ..model import DEFAULT_CRITERIA, FilterCriteria, Project
from .cards import render_cards, render_filter_tags
from .panels import render_copy_email
from .escape import esc

try:
    import orjson  # type: ignore
except Exception:  # pragma: no cover
    orjson = None  # type: ignore

_DATA_MARKER = "__DATA_JSON__"
_PLACEHOLDER_RE = re.compile(r"__(TITLE|QUERY|TAGS|CARDS|NO_RESULTS_HIDDEN|CONTACT|DATA_JSON)__")

PAGE_SHELL = r"""<!doctype html>
<html lang="en" data-theme="light">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<title>__TITLE__</title>
</head>
<body>
<header class="site-header">
  <h1>__TITLE__</h1>
  <button class="theme-toggle" aria-pressed="false" aria-label="Switch to dark theme">Theme</button>
</header>
<main>
  <section id="projects" aria-labelledby="projects-heading">
    <h2 id="projects-heading">Projects</h2>
    <input type="search" id="search-input" placeholder="Search projects..." value="__QUERY__" aria-label="Search projects" />
    <div class="filter-tags" id="filter-tags" role="group" aria-label="Filter by tag">__TAGS__</div>
    <div class="projects-grid" id="projects-grid" aria-live="polite">__CARDS__</div>
    <div id="no-results" class="no-results"__NO_RESULTS_HIDDEN__>
      <p>No projects match your filters.</p>
      <button class="btn btn-outline" id="reset-filters">Reset filters</button>
    </div>
  </section>
</main>
<footer class="site-footer">__CONTACT__</footer>
<div class="modal" id="project-modal" role="dialog" aria-modal="true" aria-labelledby="modal-title" hidden>
  <div class="modal-overlay"></div>
  <div class="modal-content">
    <button class="modal-close" aria-label="Close project details">Close</button>
    <div id="modal-body"></div>
  </div>
</div>
<div id="toast" class="toast" role="status" aria-live="polite" hidden><span id="toast-message"></span></div>
<script id="projects-data" type="application/json">
__DATA_JSON__
</script>
</body>
</html>
"""


def _data_json(projects: Sequence[Project]) -> str:
    records = [p.raw for p in projects]
    if orjson is not None:
        data_json = orjson.dumps(records).decode("utf-8")
    else:
        data_json = json.dumps(records, ensure_ascii=False, separators=(",", ":"))
    return data_json.replace("</", r"<\/")  # script-safe injection


def build_page(
    projects: Sequence[Project],
    *,
    criteria: Optional[FilterCriteria] = None,
    title: str = "Projects",
    reduced_motion: bool = False,
    contact_email: Optional[str] = None,
) -> str:
    """Render a static gallery snapshot with every mount point present.

    The full catalog is embedded as JSON; the grid holds the cards matching
    criteria at build time.
    """
    crit = criteria or DEFAULT_CRITERIA
    visible = apply(projects, crit)

    n = PAGE_SHELL.count(_DATA_MARKER)
    if n != 1:
        raise RuntimeError(f"PAGE_SHELL must contain {_DATA_MARKER} exactly once (found {n})")

    values = {
        "TITLE": esc(title),
        "QUERY": esc(crit.search_query),
        "TAGS": render_filter_tags(tags_universe(tuple(projects)), active=crit.active_tag),
        "CARDS": render_cards(visible, reduced_motion=reduced_motion),
        "NO_RESULTS_HIDDEN": "" if not visible else " hidden",
        "CONTACT": render_copy_email(contact_email) if contact_email else "",
        "DATA_JSON": _data_json(projects),
    }
    # one pass: substituted catalog text is never rescanned for placeholders
    return _PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], PAGE_SHELL)
