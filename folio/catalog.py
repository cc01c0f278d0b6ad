# folio/catalog.py
from __future__ import annotations

import json
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple, Union
from urllib import error, request

from .model import ALL_TAGS, Catalog, Project
from .util.console import obs
from .validate import SchemaError, validate_catalog

Source = Union[str, Path]


class FetchError(RuntimeError):
    """Raised when the catalog resource cannot be retrieved."""

    def __init__(self, message: str, *, status: Optional[int] = None, source: str = ""):
        super().__init__(message)
        self.status = status
        self.source = source


@dataclass(frozen=True)
class FetchResult:
    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


Fetcher = Callable[[str], FetchResult]


def fetch_timeout_s() -> float:
    raw = (os.getenv("FOLIO_FETCH_TIMEOUT_S", "10") or "").strip()
    try:
        v = float(raw)
        if v > 0:
            return v
    except ValueError:
        pass
    return 10.0


def _is_url(source: str) -> bool:
    s = source.lower()
    return s.startswith("http://") or s.startswith("https://")


def fetch_resource(source: str) -> FetchResult:
    """Fetch raw bytes from an http(s) URL or a local path.

    HTTP error statuses are returned, not raised; a missing local file is
    reported as 404. Transport failures raise FetchError.
    """
    if not _is_url(source):
        p = Path(source).expanduser()
        if not p.is_file():
            return FetchResult(status=404, body=b"")
        try:
            return FetchResult(status=200, body=p.read_bytes())
        except OSError as e:
            raise FetchError(f"Could not read {p}: {e}", source=source) from e

    req = request.Request(source, headers={"Accept": "application/json"})
    try:
        with request.urlopen(req, timeout=fetch_timeout_s()) as resp:
            return FetchResult(status=int(resp.status), body=resp.read())
    except error.HTTPError as e:
        return FetchResult(status=int(e.code), body=b"")
    except (error.URLError, TimeoutError, OSError) as e:
        reason = getattr(e, "reason", e)
        raise FetchError(f"Network error fetching {source}: {reason}", source=source) from e


def parse_catalog(body: bytes | str, *, strict: bool = False) -> Catalog:
    """Decode and validate a catalog document; return the projects."""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise SchemaError(f"catalog is not valid JSON: {e}") from e

    errs = validate_catalog(payload, strict=strict)
    if errs:
        raise SchemaError(errs)
    return tuple(Project.from_dict(rec) for rec in payload)


def tags_universe(catalog: Catalog) -> Tuple[str, ...]:
    """Return "all" followed by every distinct tag in first-seen order."""
    seen = {ALL_TAGS}
    out = [ALL_TAGS]
    for p in catalog:
        for t in p.tags:
            if t not in seen:
                seen.add(t)
                out.append(t)
    return tuple(out)


class CatalogStore:
    """Holds the catalog for a session; `load` replaces it wholesale."""

    def __init__(self, fetcher: Optional[Fetcher] = None, *, strict: bool = False):
        self._fetcher: Fetcher = fetcher or fetch_resource
        self._strict = strict
        self._projects: Optional[Catalog] = None

    @property
    def projects(self) -> Optional[Catalog]:
        return self._projects

    @property
    def is_loaded(self) -> bool:
        return self._projects is not None

    def load(self, source: Source) -> Catalog:
        src = str(source)
        t0 = time.monotonic()
        res = self._fetcher(src)
        if not res.ok:
            raise FetchError(f"HTTP error! status: {res.status}", status=res.status, source=src)

        projects = parse_catalog(res.body, strict=self._strict)
        self._projects = projects

        elapsed_ms = int((time.monotonic() - t0) * 1000)
        obs("folio.catalog", f"load.ok ms={elapsed_ms} projects={len(projects)} source={src}")
        return projects

    def tags_universe(self) -> Tuple[str, ...]:
        return tags_universe(self._projects or ())


__all__ = [
    "CatalogStore",
    "FetchError",
    "FetchResult",
    "Fetcher",
    "fetch_resource",
    "parse_catalog",
    "tags_universe",
]
