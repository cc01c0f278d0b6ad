from __future__ import annotations

import unittest
from pathlib import Path

from folio.app import bootstrap
from folio.catalog import FetchResult
from folio.dom import Document
from folio.gallery import GalleryState
from folio.mounts import RenderError
from folio.render.page import build_page
from folio.theme import DARK, LIGHT

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURE = REPO_ROOT / "tests" / "fixtures" / "projects.json"


def _ok(source: str) -> FetchResult:
    return FetchResult(200, FIXTURE.read_bytes())


class TestBootstrapContract(unittest.TestCase):
    def _app(self, **kw):
        doc = Document.from_html(build_page(()))
        kw.setdefault("fetcher", _ok)
        return doc, bootstrap(doc, "projects.json", **kw)

    def test_bootstrap_loads_gallery_and_applies_theme(self) -> None:
        doc, app = self._app()
        self.assertIs(app.gallery.state, GalleryState.READY)
        self.assertEqual(len(app.gallery.visible), 4)
        self.assertEqual(doc.document_element.tag, "html")
        self.assertEqual(doc.document_element.attrs["data-theme"], LIGHT)
        self.assertTrue(app.mounts.modal.container.hidden)
        self.assertIsNone(app.contact)

    def test_prefers_dark_without_saved_theme(self) -> None:
        doc, app = self._app(prefers_dark=True)
        self.assertEqual(app.theme.theme, DARK)
        self.assertEqual(app.mounts.theme_toggle.attrs["aria-pressed"], "true")

    def test_initialize_false_leaves_gallery_uninitialized(self) -> None:
        doc, app = self._app(initialize=False)
        self.assertIs(app.gallery.state, GalleryState.UNINITIALIZED)

    def test_load_failure_is_not_fatal(self) -> None:
        doc, app = self._app(fetcher=lambda s: FetchResult(404, b""))
        self.assertIs(app.gallery.state, GalleryState.LOAD_FAILED)
        self.assertIn("404", app.mounts.gallery.grid.text_content)

    def test_slash_focuses_search(self) -> None:
        doc, app = self._app()
        ev = doc.press("/")
        self.assertTrue(ev.default_prevented)
        self.assertIs(doc.active_element, app.mounts.gallery.search)

    def test_t_toggles_theme_and_announces(self) -> None:
        doc, app = self._app()
        doc.press("t")
        self.assertEqual(app.theme.theme, DARK)
        self.assertEqual(doc.document_element.attrs["data-theme"], DARK)
        self.assertIn("Switched to dark mode", app.announcer.history)
        doc.press("T")
        self.assertEqual(app.theme.theme, LIGHT)

    def test_shortcuts_ignored_while_typing(self) -> None:
        doc, app = self._app()
        app.mounts.gallery.search.focus()
        doc.press("t")
        self.assertEqual(app.theme.theme, LIGHT)

    def test_shortcuts_ignored_while_modal_open(self) -> None:
        doc, app = self._app()
        app.mounts.gallery.grid.query_class("view-details").click()
        self.assertTrue(app.modal.is_open)
        doc.press("t")
        self.assertEqual(app.theme.theme, LIGHT)
        doc.press("Escape")
        self.assertFalse(app.modal.is_open)

    def test_copy_email_button_is_wired(self) -> None:
        doc = Document.from_html(build_page((), contact_email="me@example.org"))
        copied = []
        app = bootstrap(doc, "projects.json", fetcher=_ok, clipboard=copied.append)
        doc.query_class("copy-email").click()
        self.assertEqual(copied, ["me@example.org"])
        self.assertEqual(app.toast.message, "Email copied to clipboard!")

    def test_announcements_share_one_live_region(self) -> None:
        doc, app = self._app()
        doc.press("t")
        doc.press("t")
        regions = doc.body.query_class_all("sr-only")
        self.assertEqual(len(regions), 1)
        self.assertEqual(regions[0].text_content, "Switched to light mode")

    def test_missing_mounts_show_diagnostic(self) -> None:
        doc = Document.from_html('<html><body><div id="projects-grid"></div></body></html>')
        with self.assertRaises(RenderError) as ctx:
            bootstrap(doc, "projects.json", fetcher=_ok)

        missing = ctx.exception.missing
        self.assertIn("#filter-tags", missing)
        self.assertIn("#search-input", missing)
        self.assertIn("#project-modal", missing)
        self.assertNotIn("#projects-grid", missing)

        self.assertIn("Initialization Error", doc.body.text_content)
        items = [li.text_content for li in doc.body.query_tag_all("li")]
        self.assertEqual(items, missing)

    def test_modal_without_close_control_is_reported(self) -> None:
        markup = build_page(()).replace('class="modal-close"', 'class="other"')
        doc = Document.from_html(markup)
        with self.assertRaises(RenderError) as ctx:
            bootstrap(doc, "projects.json", fetcher=_ok)
        self.assertEqual(ctx.exception.missing, ["#project-modal .modal-close"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
