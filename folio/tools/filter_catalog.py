#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from folio.catalog import CatalogStore, FetchError
from folio.filters import apply
from folio.model import ALL_TAGS, FilterCriteria
from folio.validate import SchemaError


def _die(msg: str, rc: int = 2) -> int:
    print(f"[folio-filter-catalog] ERROR: {msg}", file=sys.stderr)
    return rc


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="folio-filter-catalog",
        description="Write the subset of a catalog matching a tag and/or search query.",
    )
    ap.add_argument("--in", dest="in_json", required=True, help="Input catalog path or http(s) URL")
    ap.add_argument("--tag", default=ALL_TAGS, help="Tag to keep (default: all)")
    ap.add_argument("--q", default="", help="Case-insensitive search over title and description")
    ap.add_argument("--out", required=True, help="Output catalog JSON path")
    ap.add_argument("--pretty", action="store_true", help="Pretty JSON output")
    ns = ap.parse_args(argv)

    try:
        projects = CatalogStore().load(ns.in_json)
    except FetchError as e:
        return _die(f"Failed to load catalog: {ns.in_json} ({e})")
    except SchemaError as e:
        return _die(f"Invalid catalog: {'; '.join(e.errors[:10])}", rc=3)

    visible = apply(projects, FilterCriteria(active_tag=ns.tag or ALL_TAGS, search_query=ns.q or ""))

    out_path = Path(ns.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    txt = json.dumps([p.raw for p in visible], ensure_ascii=False, indent=2 if ns.pretty else None)
    out_path.write_text(txt + "\n", encoding="utf-8", newline="\n")

    print(f"[folio-filter-catalog] OK: wrote {len(visible)} of {len(projects)} projects to {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
