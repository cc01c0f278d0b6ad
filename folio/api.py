"""folio.api

Stable *library* entrypoint for folio.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from folio.app import PortfolioApp, bootstrap
from folio.catalog import CatalogStore, FetchError, FetchResult, fetch_resource, tags_universe
from folio.dom import Document, Element, Event
from folio.filters import apply as filter_projects
from folio.gallery import GalleryController, GalleryState
from folio.html_extract import extract_catalog_json_from_html_file
from folio.modal import ModalController, ModalState
from folio.model import ALL_TAGS, DEFAULT_CRITERIA, Catalog, FilterCriteria, Project
from folio.mounts import RenderError, resolve_mounts
from folio.render.cards import render_card
from folio.render.page import build_page
from folio.render.panels import render_modal_body
from folio.validate import SchemaError, assert_valid_catalog, validate_catalog

JsonPath = Union[str, Path]


def load_catalog(source: JsonPath, *, strict: bool = False) -> Catalog:
    """Load and validate a catalog from a path or http(s) URL.

    Raises FetchError for missing/unreachable resources and SchemaError for
    malformed payloads.
    """
    return CatalogStore(strict=strict).load(source)


def load_catalog_from_html(path: JsonPath, *, strict: bool = False) -> Catalog:
    """Load the catalog embedded in a page produced by build_page."""
    records = extract_catalog_json_from_html_file(path)
    assert_valid_catalog(records, strict=strict)
    return tuple(Project.from_dict(r) for r in records)


def select_projects(
    catalog: Catalog,
    *,
    tag: str = ALL_TAGS,
    query: str = "",
) -> List[Project]:
    """Convenience wrapper around filter_projects with keyword criteria."""
    return filter_projects(catalog, FilterCriteria(active_tag=tag or ALL_TAGS, search_query=query or ""))


def project_by_id(catalog: Catalog, pid: str, *, default: Optional[Project] = None) -> Optional[Project]:
    for p in catalog:
        if p.id == pid:
            return p
    return default


__all__ = [
    "ALL_TAGS",
    "CatalogStore",
    "DEFAULT_CRITERIA",
    "Document",
    "Element",
    "Event",
    "FetchError",
    "FetchResult",
    "FilterCriteria",
    "GalleryController",
    "GalleryState",
    "ModalController",
    "ModalState",
    "PortfolioApp",
    "Project",
    "RenderError",
    "SchemaError",
    "bootstrap",
    "build_page",
    "fetch_resource",
    "filter_projects",
    "load_catalog",
    "load_catalog_from_html",
    "project_by_id",
    "render_card",
    "render_modal_body",
    "resolve_mounts",
    "select_projects",
    "tags_universe",
    "validate_catalog",
]
