"""folio.filters

Pure filtering of a catalog by tag and free-text search.
"""

from __future__ import annotations

from typing import Iterable, List

from .model import ALL_TAGS, FilterCriteria, Project


def matches(project: Project, criteria: FilterCriteria) -> bool:
    tag = criteria.active_tag
    if tag and tag != ALL_TAGS and tag not in project.tags:
        return False

    q = criteria.search_query
    if q == "":
        return True
    q = q.lower()
    return q in project.title.lower() or q in project.description.lower()


def apply(catalog: Iterable[Project], criteria: FilterCriteria) -> List[Project]:
    """Return the projects matching criteria, in catalog order."""
    return [p for p in catalog if matches(p, criteria)]


__all__ = ["apply", "matches"]
