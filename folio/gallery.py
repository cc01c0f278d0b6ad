# folio/gallery.py
from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import List, Optional, Union

from . import filters
from .catalog import CatalogStore, FetchError, Source
from .dom import Event
from .modal import ModalController
from .model import DEFAULT_CRITERIA, FilterCriteria, Project
from .mounts import GalleryMounts
from .render.cards import render_cards, render_filter_tags, render_skeleton_cards
from .render.panels import render_load_error
from .util.console import eprint
from .validate import SchemaError

SKELETON_COUNT = 6


class GalleryState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    LOAD_FAILED = "load_failed"


class GalleryController:
    """Loads the catalog and keeps the grid in sync with the filter criteria.

    The criteria are owned here and replaced only through the setters.
    `visible` is None until the catalog is loaded, so an empty filter result
    ([]) stays distinguishable from "nothing loaded yet".
    """

    def __init__(
        self,
        mounts: GalleryMounts,
        store: CatalogStore,
        modal: ModalController,
        *,
        source: Source,
        reduced_motion: bool = False,
    ):
        self._m = mounts
        self._store = store
        self._modal = modal
        self._source = source
        self._reduced_motion = reduced_motion

        self.state = GalleryState.UNINITIALIZED
        self.criteria: FilterCriteria = DEFAULT_CRITERIA
        self.visible: Optional[List[Project]] = None
        self.error: Optional[Union[FetchError, SchemaError]] = None

        self._m.search.add_listener("input", self._on_search_input)
        if self._m.reset is not None:
            self._m.reset.add_listener("click", self._on_reset_click)

    # --- lifecycle ----------------------------------------------------------

    def initialize(self) -> GalleryState:
        self.state = GalleryState.LOADING
        self.error = None
        self.visible = None
        self._m.grid.set_html(render_skeleton_cards(SKELETON_COUNT))
        self._m.grid.attrs["aria-busy"] = "true"
        if self._m.no_results is not None:
            self._m.no_results.hidden = True

        try:
            self._store.load(self._source)
        except (FetchError, SchemaError) as e:
            eprint(f"[folio.gallery] ERROR: loading projects failed: {e}")
            self.state = GalleryState.LOAD_FAILED
            self.error = e
            self._m.grid.attrs.pop("aria-busy", None)
            self._m.grid.set_html(render_load_error(str(e)))
            retry = self._m.grid.query_class("retry-load")
            if retry is not None:
                retry.add_listener("click", self._on_retry_click)
            return self.state

        self._m.grid.attrs.pop("aria-busy", None)
        self.criteria = DEFAULT_CRITERIA
        self._m.search.value = ""
        self._render_tags()
        self.state = GalleryState.READY
        self.refresh()
        return self.state

    def retry(self) -> GalleryState:
        if self.state is not GalleryState.LOAD_FAILED:
            return self.state
        return self.initialize()

    # --- criteria -----------------------------------------------------------

    def set_active_tag(self, tag: str) -> None:
        self.criteria = replace(self.criteria, active_tag=tag or DEFAULT_CRITERIA.active_tag)
        self._sync_tag_buttons()
        self.refresh()

    def set_search_query(self, query: str) -> None:
        self.criteria = replace(self.criteria, search_query=query or "")
        self.refresh()

    def reset_filters(self) -> None:
        self.criteria = DEFAULT_CRITERIA
        self._m.search.value = ""
        self._sync_tag_buttons()
        self.refresh()

    # --- rendering ----------------------------------------------------------

    def refresh(self) -> None:
        """Re-derive the visible set and re-render; no-op until READY."""
        if self.state is not GalleryState.READY:
            return
        catalog = self._store.projects or ()
        visible = filters.apply(catalog, self.criteria)
        self.visible = visible

        if not visible:
            self._m.grid.set_html("")
            if self._m.no_results is not None:
                self._m.no_results.hidden = False
            return

        if self._m.no_results is not None:
            self._m.no_results.hidden = True
        self._m.grid.set_html(render_cards(visible, reduced_motion=self._reduced_motion))

        for btn in self._m.grid.query_class_all("view-details"):
            idx = int(btn.attrs.get("data-index", "-1"))
            if 0 <= idx < len(visible):
                btn.add_listener("click", self._opener(visible[idx]))

    def _opener(self, project: Project):
        def _open(event: Event) -> None:
            self._modal.open(project)

        return _open

    def _render_tags(self) -> None:
        self._m.tags.set_html(render_filter_tags(self._store.tags_universe(), active=self.criteria.active_tag))
        for btn in self._m.tags.query_class_all("tag-btn"):
            btn.add_listener("click", self._on_tag_click)

    def _sync_tag_buttons(self) -> None:
        for btn in self._m.tags.query_class_all("tag-btn"):
            on = btn.attrs.get("data-tag") == self.criteria.active_tag
            btn.toggle_class("active", on)
            btn.attrs["aria-pressed"] = "true" if on else "false"

    # --- DOM handlers -------------------------------------------------------

    def _on_tag_click(self, event: Event) -> None:
        el = event.current_target
        tag = getattr(el, "attrs", {}).get("data-tag")
        if tag:
            self.set_active_tag(tag)

    def _on_search_input(self, event: Event) -> None:
        self.set_search_query(self._m.search.value)

    def _on_reset_click(self, event: Event) -> None:
        self.reset_filters()

    def _on_retry_click(self, event: Event) -> None:
        self.retry()
