"""Snapshot contract definitions.

This module defines the stable shape of a docsnap snapshot: its filename
and its top-level keys.
"""

from __future__ import annotations

SNAPSHOT_SUFFIX = ".json.gz"

# Project descriptor fields copied into every snapshot, in document order.
PROJECT_META_KEYS = (
    "name",
    "url",
    "description",
    "version",
    "group",
    "scm",
    "license",
)

NAMESPACES_KEY = "namespaces"

SNAPSHOT_KEYS = frozenset({*PROJECT_META_KEYS, NAMESPACES_KEY})


def snapshot_filename(name: object, version: object) -> str:
    """Return ``<name>-<version>.json.gz``; missing parts become empty text."""
    name_part = "" if name is None else str(name)
    version_part = "" if version is None else str(version)
    return f"{name_part}-{version_part}{SNAPSHOT_SUFFIX}"


__all__ = [
    "NAMESPACES_KEY",
    "PROJECT_META_KEYS",
    "SNAPSHOT_KEYS",
    "SNAPSHOT_SUFFIX",
    "snapshot_filename",
]
