from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from folio.api import load_catalog_from_html
from folio.catalog import parse_catalog
from folio.dom import Document
from folio.html_extract import HtmlCatalogExtractError, extract_catalog_json_from_html_text
from folio.model import FilterCriteria
from folio.mounts import resolve_mounts
from folio.render.page import build_page

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURE = REPO_ROOT / "tests" / "fixtures" / "projects.json"


class TestPageRoundtripContract(unittest.TestCase):
    def setUp(self) -> None:
        self.records = json.loads(FIXTURE.read_text(encoding="utf-8"))
        self.projects = parse_catalog(FIXTURE.read_bytes())

    def test_embedded_catalog_roundtrips(self) -> None:
        html = build_page(self.projects)
        self.assertEqual(extract_catalog_json_from_html_text(html), self.records)

        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "index.html"
            p.write_text(html, encoding="utf-8")
            self.assertEqual(load_catalog_from_html(p), self.projects)

    def test_script_breakout_is_neutralised(self) -> None:
        rec = {"title": "x", "description": "</script><script>alert(1)</script>", "tags": []}
        html = build_page(parse_catalog(json.dumps([rec])))
        self.assertNotIn("</script><script>alert(1)", html)
        self.assertEqual(extract_catalog_json_from_html_text(html), [rec])

    def test_page_has_every_mount_point(self) -> None:
        mounts = resolve_mounts(Document.from_html(build_page(self.projects)))
        self.assertEqual(len(mounts.gallery.grid.query_class_all("project-card")), 4)
        self.assertTrue(mounts.gallery.no_results.hidden)
        self.assertTrue(mounts.modal.container.hidden)
        self.assertIsNotNone(mounts.modal.overlay)
        self.assertIsNotNone(mounts.toast)

    def test_build_time_criteria(self) -> None:
        html = build_page(self.projects, criteria=FilterCriteria(active_tag="sync", search_query="notes"))
        doc = Document.from_html(html)
        mounts = resolve_mounts(doc)
        titles = [el.text_content for el in mounts.gallery.grid.query_class_all("project-title")]
        self.assertEqual(titles, ["Notes sync"])
        self.assertEqual(mounts.gallery.search.value, "notes")
        active = [b.attrs["data-tag"] for b in mounts.gallery.tags.query_class_all("active")]
        self.assertEqual(active, ["sync"])

        empty = resolve_mounts(Document.from_html(build_page(self.projects, criteria=FilterCriteria("rust"))))
        self.assertFalse(empty.gallery.no_results.hidden)

    def test_placeholder_text_in_catalog_is_left_alone(self) -> None:
        recs = [
            {"title": "__CARDS__", "description": "see __DATA_JSON__ docs", "tags": ["__TAGS__"]},
            {"title": "B", "description": "__NO_RESULTS_HIDDEN__ and __TITLE__", "tags": []},
        ]
        html = build_page(parse_catalog(json.dumps(recs)), title="Work")
        self.assertEqual(extract_catalog_json_from_html_text(html), recs)

        mounts = resolve_mounts(Document.from_html(html))
        titles = [el.text_content for el in mounts.gallery.grid.query_class_all("project-title")]
        self.assertEqual(titles, ["__CARDS__", "B"])
        descs = [el.text_content for el in mounts.gallery.grid.query_class_all("project-description")]
        self.assertEqual(descs[1], "__NO_RESULTS_HIDDEN__ and __TITLE__")
        self.assertTrue(mounts.gallery.no_results.hidden)

    def test_copy_email_button_only_when_configured(self) -> None:
        doc = Document.from_html(build_page(self.projects))
        self.assertIsNone(doc.query_class("copy-email"))
        doc = Document.from_html(build_page(self.projects, contact_email="me@example.org"))
        self.assertEqual(doc.query_class("copy-email").attrs["data-email"], "me@example.org")

    def test_title_is_escaped(self) -> None:
        html = build_page((), title="<b>Me</b>")
        self.assertIn("&lt;b&gt;Me&lt;/b&gt;", html)
        self.assertNotIn("<b>Me</b>", html)

    def test_type_fallback_and_missing_block(self) -> None:
        html = '<script type="application/json; charset=utf-8">[{"title": "a", "description": "b"}]</script>'
        self.assertEqual(extract_catalog_json_from_html_text(html)[0]["title"], "a")
        with self.assertRaises(HtmlCatalogExtractError):
            extract_catalog_json_from_html_text("<html><body>nothing</body></html>")


if __name__ == "__main__":
    unittest.main(verbosity=2)
