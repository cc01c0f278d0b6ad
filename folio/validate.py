"""Catalog validation helpers (library-facing)."""

from __future__ import annotations

from typing import Any, List, Sequence

_REQUIRED_TEXT = ("title", "description")
_OPTIONAL_TEXT = (
    "id",
    "longDescription",
    "thumbnail",
    "thumbnailAlt",
    "image",
    "imageAlt",
    "demoUrl",
    "repoUrl",
)


class SchemaError(ValueError):
    """Raised when a catalog payload has the wrong shape."""

    def __init__(self, errors: Sequence[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors: List[str] = list(errors)
        super().__init__(self.errors[0] if self.errors else "invalid catalog")


def _require(cond: bool, msg: str, errs: List[str]) -> None:
    if not cond:
        errs.append(msg)


def validate_project(record: Any, *, label: str = "project", strict: bool = False) -> List[str]:
    if not isinstance(record, dict):
        return [f"{label} must be an object"]

    errs: List[str] = []
    for key in _REQUIRED_TEXT:
        v = record.get(key)
        _require(isinstance(v, str) and bool(v.strip()), f"{label}.{key} must be non-empty string", errs)

    if "tags" in record:
        tags = record.get("tags")
        if tags is not None:
            if not isinstance(tags, list):
                errs.append(f"{label}.tags must be list")
            else:
                for j, t in enumerate(tags):
                    _require(
                        isinstance(t, str) and bool(t.strip()),
                        f"{label}.tags[{j}] must be non-empty string",
                        errs,
                    )
    elif strict:
        errs.append(f"{label}.tags is required")

    for key in _OPTIONAL_TEXT:
        v = record.get(key)
        if v is None:
            continue
        if key == "id" and isinstance(v, int) and not isinstance(v, bool):
            continue
        _require(isinstance(v, str), f"{label}.{key} must be string when present", errs)

    return errs


def validate_catalog(payload: Any, *, label: str = "catalog", strict: bool = False) -> List[str]:
    """Return a list of problems with a catalog payload (empty when valid)."""
    if not isinstance(payload, list):
        return [f"{label}: payload must be a list of project records; got {type(payload).__name__}"]

    errs: List[str] = []
    for i, rec in enumerate(payload):
        errs.extend(f"{label}: {e}" for e in validate_project(rec, label=f"[{i}]", strict=strict))
    return errs


def assert_valid_catalog(payload: Any, *, strict: bool = False) -> None:
    errs = validate_catalog(payload, strict=strict)
    if errs:
        raise SchemaError(errs)


__all__ = [
    "SchemaError",
    "assert_valid_catalog",
    "validate_catalog",
    "validate_project",
]
