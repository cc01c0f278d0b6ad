from __future__ import annotations

import json
import unittest
from pathlib import Path

from folio.catalog import CatalogStore, FetchError, FetchResult, fetch_resource, parse_catalog
from folio.validate import SchemaError, validate_catalog

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURE = REPO_ROOT / "tests" / "fixtures" / "projects.json"
BAD_FIXTURE = REPO_ROOT / "tests" / "fixtures" / "projects_bad.json"


def _fetcher(status: int, payload) -> object:
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    return lambda source: FetchResult(status=status, body=body)


class TestCatalogStoreContract(unittest.TestCase):
    def test_load_fixture_from_path(self) -> None:
        store = CatalogStore()
        self.assertFalse(store.is_loaded)
        self.assertIsNone(store.projects)

        projects = store.load(FIXTURE)
        self.assertTrue(store.is_loaded)
        self.assertEqual(len(projects), 4)
        self.assertEqual(projects[0].title, "Portfolio site")
        self.assertEqual(projects[0].long_description.split()[0], "Static")
        # longDescription falls back to description
        self.assertEqual(projects[1].long_description, projects[1].description)
        # title doubles as id
        self.assertEqual(projects[3].id, "Notes sync")

    def test_tags_universe_is_all_then_first_seen(self) -> None:
        store = CatalogStore()
        self.assertEqual(store.tags_universe(), ("all",))
        store.load(FIXTURE)
        self.assertEqual(
            store.tags_universe(),
            ("all", "web", "javascript", "accessibility", "canvas", "cli", "python", "sync"),
        )

    def test_missing_file_is_fetch_error_404(self) -> None:
        with self.assertRaises(FetchError) as cm:
            CatalogStore().load(REPO_ROOT / "tests" / "fixtures" / "nope.json")
        self.assertEqual(cm.exception.status, 404)
        self.assertEqual(fetch_resource(str(REPO_ROOT / "missing.json")).status, 404)

    def test_http_500_is_fetch_error(self) -> None:
        store = CatalogStore(_fetcher(500, b""))
        with self.assertRaises(FetchError) as cm:
            store.load("https://example.invalid/projects.json")
        self.assertEqual(cm.exception.status, 500)
        self.assertIn("500", str(cm.exception))

    def test_non_list_payload_is_schema_error(self) -> None:
        with self.assertRaises(SchemaError):
            CatalogStore(_fetcher(200, {"projects": []})).load("x")

    def test_invalid_json_is_schema_error(self) -> None:
        with self.assertRaises(SchemaError):
            CatalogStore(_fetcher(200, b"{not json")).load("x")

    def test_bad_records_are_rejected_with_all_errors(self) -> None:
        with self.assertRaises(SchemaError) as cm:
            CatalogStore().load(BAD_FIXTURE)
        errs = cm.exception.errors
        self.assertTrue(any("[0].title" in e for e in errs), errs)
        self.assertTrue(any("[1].tags must be list" in e for e in errs), errs)
        self.assertTrue(any("[2] must be an object" in e for e in errs), errs)

    def test_missing_tags_means_no_tags_unless_strict(self) -> None:
        rec = [{"title": "T", "description": "D"}]
        projects = CatalogStore(_fetcher(200, rec)).load("x")
        self.assertEqual(projects[0].tags, ())

        with self.assertRaises(SchemaError):
            CatalogStore(_fetcher(200, rec), strict=True).load("x")
        self.assertEqual(validate_catalog(rec), [])
        self.assertTrue(validate_catalog(rec, strict=True))

    def test_blank_tags_are_rejected_not_dropped(self) -> None:
        rec = [{"title": "T", "description": "D", "tags": ["web", "", "  "]}]
        with self.assertRaises(SchemaError) as ctx:
            CatalogStore(_fetcher(200, rec)).load("x")
        self.assertEqual(
            ctx.exception.errors,
            [
                "catalog: [0].tags[1] must be non-empty string",
                "catalog: [0].tags[2] must be non-empty string",
            ],
        )

        ok = CatalogStore(_fetcher(200, [{"title": "T", "description": "D", "tags": ["web", "python"]}])).load("x")
        self.assertEqual(ok[0].tags, ("web", "python"))

    def test_failed_reload_keeps_previous_catalog(self) -> None:
        responses = [
            FetchResult(200, json.dumps([{"title": "A", "description": "a", "tags": ["web"]}]).encode()),
            FetchResult(200, b'[{"title": "B"}]'),
            FetchResult(503, b""),
        ]
        store = CatalogStore(lambda source: responses.pop(0))
        first = store.load("x")
        with self.assertRaises(SchemaError):
            store.load("x")
        self.assertIs(store.projects, first)
        with self.assertRaises(FetchError):
            store.load("x")
        self.assertIs(store.projects, first)

    def test_reload_replaces_wholesale(self) -> None:
        responses = [
            [{"title": "A", "description": "a", "tags": ["web"]}],
            [{"title": "B", "description": "b", "tags": ["cli"]}],
        ]
        store = CatalogStore(lambda source: FetchResult(200, json.dumps(responses.pop(0)).encode()))
        store.load("x")
        store.load("x")
        self.assertEqual([p.title for p in store.projects], ["B"])
        self.assertEqual(store.tags_universe(), ("all", "cli"))

    def test_parse_catalog_accepts_text(self) -> None:
        projects = parse_catalog(FIXTURE.read_text(encoding="utf-8"))
        self.assertEqual(len(projects), 4)


if __name__ == "__main__":
    unittest.main(verbosity=2)
