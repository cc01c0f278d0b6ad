#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List

from folio.html_extract import HtmlCatalogExtractError, extract_catalog_json_from_html_file
from folio.validate import validate_catalog


def _die(msg: str, rc: int = 2) -> int:
    print(f"[folio-validate-catalog] ERROR: {msg}", file=sys.stderr)
    return rc


def _load_json(p: Path) -> Any:
    return json.loads(p.read_text(encoding="utf-8", errors="replace"))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="folio-validate-catalog",
        description="Validate a projects catalog from JSON and/or a rendered gallery page.",
    )
    ap.add_argument("--in", dest="in_json", default=None, help="Input catalog JSON path")
    ap.add_argument("--from-html", dest="from_html", default=None, help="Extract catalog from a rendered HTML page")
    ap.add_argument("--strict", action="store_true", help="Also require a tags list on every record")
    ns = ap.parse_args(argv)

    if not ns.in_json and not ns.from_html:
        return _die("Provide --in and/or --from-html")

    all_errs: List[str] = []

    if ns.in_json:
        p = Path(ns.in_json)
        if not p.exists():
            return _die(f"Missing JSON file: {p}")
        try:
            payload = _load_json(p)
        except ValueError as e:
            return _die(f"Failed to parse JSON catalog: {p} ({e})")
        all_errs.extend(f"json:{p}: {e}" for e in validate_catalog(payload, strict=ns.strict))

    if ns.from_html:
        p = Path(ns.from_html)
        if not p.exists():
            return _die(f"Missing HTML file: {p}")
        try:
            payload = extract_catalog_json_from_html_file(p)
        except HtmlCatalogExtractError as e:
            return _die(f"Failed to extract catalog from HTML: {p} ({e})")
        all_errs.extend(f"html:{p}: {e}" for e in validate_catalog(payload, strict=ns.strict))

    if all_errs:
        print("[folio-validate-catalog] FAIL", file=sys.stderr)
        for e in all_errs:
            print(f"  - {e}", file=sys.stderr)
        return 3

    print("[folio-validate-catalog] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
