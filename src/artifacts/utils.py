"""Utility functions for snapshot serialization."""

from __future__ import annotations

import gzip
from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from pathlib import Path


def _to_dict(obj: object) -> object:
    """Convert object to dict for JSON serialization."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    return obj


def _write_json_gz(path: Path, obj: object) -> None:
    """Write ``obj`` as gzip-compressed UTF-8 JSON with sorted keys.

    The file and the gzip stream are both closed on every exit path; a
    failed write leaves whatever was flushed so far on disk.
    """
    payload = _to_dict(obj)
    with path.open("wb") as raw, gzip.GzipFile(
        filename="", mode="wb", fileobj=raw, mtime=0
    ) as compressed:
        compressed.write(orjson.dumps(payload, option=orjson.OPT_SORT_KEYS))
