# folio/app.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .catalog import CatalogStore, Fetcher, Source
from .contact import ClipboardWriter, ContactForm, Poster, post_form, wire_copy_buttons
from .dom import Document, Event
from .gallery import GalleryController
from .modal import ModalController
from .mounts import RenderError, Mounts, resolve_mounts, show_diagnostic
from .notify import Announcer, Toast
from .theme import LocalStore, ThemeController

_TEXT_INPUT_TAGS = frozenset({"input", "textarea"})


@dataclass
class PortfolioApp:
    document: Document
    mounts: Mounts
    gallery: GalleryController
    modal: ModalController
    theme: ThemeController
    toast: Toast
    announcer: Announcer
    contact: Optional[ContactForm] = None

    def handle_keydown(self, event: Event) -> None:
        """Page-wide shortcuts: "/" focuses search, "t" toggles the theme."""
        if self.modal.is_open:
            return
        target = event.target
        in_text = target is not None and target.tag in _TEXT_INPUT_TAGS
        if in_text:
            return
        if event.key == "/":
            event.prevent_default()
            self.mounts.gallery.search.focus()
        elif event.key in ("t", "T"):
            self.theme.toggle()


def bootstrap(
    document: Document,
    source: Source,
    *,
    fetcher: Optional[Fetcher] = None,
    state_path: Optional[Path] = None,
    prefers_dark: bool = False,
    reduced_motion: bool = False,
    poster: Poster = post_form,
    clipboard: Optional[ClipboardWriter] = None,
    initialize: bool = True,
) -> PortfolioApp:
    """Wire every controller onto document and load the catalog.

    Missing mount points replace the page with a diagnostic and raise
    RenderError; catalog load failures leave the gallery in LOAD_FAILED.
    state_path=None keeps the theme choice in memory; pass
    theme.default_state_path() to persist it across sessions.
    """
    try:
        mounts = resolve_mounts(document)
    except RenderError as e:
        show_diagnostic(document, e.missing)
        raise

    announcer = Announcer(document)
    toast = Toast(mounts.toast, mounts.toast_message)

    theme = ThemeController(
        LocalStore(state_path),
        document.document_element,
        toggle=mounts.theme_toggle,
        prefers_dark=prefers_dark,
        announce=announcer,
    )
    theme.init()

    modal = ModalController(document, mounts.modal, announce=announcer)
    gallery = GalleryController(
        mounts.gallery,
        CatalogStore(fetcher),
        modal,
        source=source,
        reduced_motion=reduced_motion,
    )

    contact = None
    if mounts.contact_form is not None:
        contact = ContactForm(mounts.contact_form, toast=toast, poster=poster)
    wire_copy_buttons(document.root, clipboard or document.write_clipboard, toast=toast)

    app = PortfolioApp(
        document=document,
        mounts=mounts,
        gallery=gallery,
        modal=modal,
        theme=theme,
        toast=toast,
        announcer=announcer,
        contact=contact,
    )
    document.add_listener("keydown", app.handle_keydown)

    if initialize:
        gallery.initialize()
    return app
