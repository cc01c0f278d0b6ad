from __future__ import annotations

import argparse
import os
import sys
import webbrowser
from pathlib import Path

from .catalog import CatalogStore, FetchError
from .model import ALL_TAGS, FilterCriteria
from .render.page import build_page
from .validate import SchemaError


def main(argv: list[str] | None = None) -> None:
    default_out = os.path.join("build", "index.html")
    ap = argparse.ArgumentParser(
        description="Render a static portfolio gallery page from a projects JSON catalog."
    )
    ap.add_argument(
        "--catalog",
        default=os.getenv("FOLIO_CATALOG", "projects.json"),
        help="Catalog path or http(s) URL (default: env FOLIO_CATALOG or projects.json)",
    )
    ap.add_argument("--tag", default=ALL_TAGS, help="Initially active tag (default: all)")
    ap.add_argument("--q", default="", help="Initial search query (default: empty)")
    ap.add_argument("--title", default="Projects", help="Page title (default: Projects)")
    ap.add_argument(
        "--email",
        default=os.getenv("FOLIO_CONTACT_EMAIL", ""),
        help="Contact address for the copy-email button (default: env FOLIO_CONTACT_EMAIL; none)",
    )
    ap.add_argument("--strict", action="store_true", help="Require a tags list on every record")
    ap.add_argument("--reduced-motion", action="store_true", help="Disable card stagger delays")
    ap.add_argument("--out", default=default_out, help="Output HTML path (default: ./build/index.html)")
    ap.add_argument("--no-open", action="store_true", help="Do not open the generated HTML in a browser")

    args = ap.parse_args(argv)

    try:
        projects = CatalogStore(strict=bool(args.strict)).load(args.catalog)
    except FetchError as e:
        raise SystemExit(f"Failed to load catalog {args.catalog}: {e}")
    except SchemaError as e:
        raise SystemExit(f"Invalid catalog {args.catalog}: " + "; ".join(e.errors[:10]))

    html = build_page(
        projects,
        criteria=FilterCriteria(active_tag=args.tag or ALL_TAGS, search_query=args.q or ""),
        title=args.title,
        reduced_motion=bool(args.reduced_motion),
        contact_email=(args.email or "").strip() or None,
    )

    out_path = os.path.abspath(args.out)
    try:
        Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        if args.out == default_out:
            fallback = Path.home() / ".folio" / "build" / "index.html"
            fallback.parent.mkdir(parents=True, exist_ok=True)
            out_path = str(fallback)
            print(
                f"[folio] WARN: default output directory is not writable; using {out_path}",
                file=sys.stderr,
            )
        else:
            raise SystemExit(f"Cannot create output directory '{Path(out_path).parent}': {e}")
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(html)

    print(out_path)

    if not args.no_open:
        try:
            webbrowser.open("file://" + out_path)
        except webbrowser.Error:
            pass


if __name__ == "__main__":
    main()
