# folio/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

ALL_TAGS = "all"

JsonDict = Dict[str, Any]


def _opt_str(raw: Mapping[str, Any], key: str) -> Optional[str]:
    v = raw.get(key)
    if isinstance(v, str) and v.strip():
        return v
    return None


@dataclass(frozen=True)
class Project:
    id: str
    title: str
    description: str
    long_description: str
    tags: Tuple[str, ...] = ()

    thumbnail: Optional[str] = None
    thumbnail_alt: Optional[str] = None
    image: Optional[str] = None
    image_alt: Optional[str] = None

    demo_url: Optional[str] = None
    repo_url: Optional[str] = None

    raw: JsonDict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Project":
        """Build a Project from a validated catalog record.

        Missing `tags` means no tags; missing `longDescription` falls back to
        `description`; the title doubles as id when the record has none.
        """
        title = str(raw.get("title") or "")
        description = str(raw.get("description") or "")

        rid = raw.get("id")
        pid = str(rid) if isinstance(rid, (str, int)) and str(rid).strip() else title

        tags_in = raw.get("tags")
        tags: Tuple[str, ...] = ()
        if isinstance(tags_in, list):
            tags = tuple(t for t in tags_in if isinstance(t, str))

        return cls(
            id=pid,
            title=title,
            description=description,
            long_description=_opt_str(raw, "longDescription") or description,
            tags=tags,
            thumbnail=_opt_str(raw, "thumbnail"),
            thumbnail_alt=_opt_str(raw, "thumbnailAlt"),
            image=_opt_str(raw, "image"),
            image_alt=_opt_str(raw, "imageAlt"),
            demo_url=_opt_str(raw, "demoUrl"),
            repo_url=_opt_str(raw, "repoUrl"),
            raw=dict(raw),
        )


@dataclass(frozen=True)
class FilterCriteria:
    active_tag: str = ALL_TAGS
    search_query: str = ""


DEFAULT_CRITERIA = FilterCriteria()

Catalog = Tuple[Project, ...]


__all__ = [
    "ALL_TAGS",
    "Catalog",
    "DEFAULT_CRITERIA",
    "FilterCriteria",
    "Project",
]
