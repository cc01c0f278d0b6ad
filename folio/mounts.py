# folio/mounts.py
"""Mount point lookup: the named document locations the controllers use."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .dom import Document, Element
from .render.panels import render_init_error
from .util.console import eprint

GRID_ID = "projects-grid"
TAGS_ID = "filter-tags"
SEARCH_ID = "search-input"
MODAL_ID = "project-modal"
MODAL_BODY_ID = "modal-body"
NO_RESULTS_ID = "no-results"
RESET_ID = "reset-filters"
TOAST_ID = "toast"
TOAST_MESSAGE_ID = "toast-message"
CONTACT_FORM_ID = "contact-form"


class RenderError(RuntimeError):
    """Raised when required mount points are missing from the document."""

    def __init__(self, missing: Sequence[str]):
        self.missing: List[str] = list(missing)
        super().__init__("Missing required elements: " + ", ".join(self.missing))


@dataclass
class GalleryMounts:
    grid: Element
    tags: Element
    search: Element
    no_results: Optional[Element] = None
    reset: Optional[Element] = None


@dataclass
class ModalMounts:
    container: Element
    body: Element
    close: Element
    overlay: Optional[Element] = None


@dataclass
class Mounts:
    gallery: GalleryMounts
    modal: ModalMounts
    theme_toggle: Optional[Element] = None
    toast: Optional[Element] = None
    toast_message: Optional[Element] = None
    contact_form: Optional[Element] = None


def resolve_mounts(document: Document) -> Mounts:
    """Look up every mount point; raise RenderError naming all missing ones."""
    missing: List[str] = []

    def need(id_: str) -> Optional[Element]:
        el = document.get_element_by_id(id_)
        if el is None:
            missing.append(f"#{id_}")
        return el

    grid = need(GRID_ID)
    tags = need(TAGS_ID)
    search = need(SEARCH_ID)
    container = need(MODAL_ID)
    body = need(MODAL_BODY_ID)

    close = container.query_class("modal-close") if container is not None else None
    if container is not None and close is None:
        missing.append(f"#{MODAL_ID} .modal-close")

    if missing:
        raise RenderError(missing)

    return Mounts(
        gallery=GalleryMounts(
            grid=grid,  # type: ignore[arg-type]
            tags=tags,  # type: ignore[arg-type]
            search=search,  # type: ignore[arg-type]
            no_results=document.get_element_by_id(NO_RESULTS_ID),
            reset=document.get_element_by_id(RESET_ID),
        ),
        modal=ModalMounts(
            container=container,  # type: ignore[arg-type]
            body=body,  # type: ignore[arg-type]
            close=close,  # type: ignore[arg-type]
            overlay=container.query_class("modal-overlay"),  # type: ignore[union-attr]
        ),
        theme_toggle=document.query_class("theme-toggle"),
        toast=document.get_element_by_id(TOAST_ID),
        toast_message=document.get_element_by_id(TOAST_MESSAGE_ID),
        contact_form=document.get_element_by_id(CONTACT_FORM_ID),
    )


def show_diagnostic(document: Document, missing: Sequence[str]) -> None:
    """Replace the page body with a diagnostic listing missing mount points."""
    eprint(f"[folio.mounts] ERROR: missing required elements: {', '.join(missing)}")
    document.body.set_html(render_init_error(missing))
