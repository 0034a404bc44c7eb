"""Turn raw symbol metadata into serializable records."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

# Fields that reference live objects and cannot be indexed.
DROPPED_FIELDS = frozenset({"protocol", "inline", "inline_arities"})


def format_tag(tag: object) -> str | None:
    """Return the printed form of a type tag, or None when there is none."""
    if tag is None:
        return None
    if isinstance(tag, str):
        return tag
    if inspect.isclass(tag) and not hasattr(tag, "__origin__"):
        if tag.__module__ == "builtins":
            return tag.__qualname__
        return f"{tag.__module__}.{tag.__qualname__}"
    return inspect.formatannotation(tag)


def munge_symbol(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Take a raw symbol record and munge it into an indexable doc record.

    Removes fields that can't be indexed and converts the rest into plain
    strings. Keys missing from ``raw`` stay missing.
    """
    doc = {key: value for key, value in raw.items() if key not in DROPPED_FIELDS}

    if "ns" in doc:
        doc["ns"] = str(doc["ns"])
    if "name" in doc:
        doc["name"] = str(doc["name"])
    if "tag" in doc:
        doc["tag"] = format_tag(doc["tag"])
    if "arglists" in doc:
        doc["arglists"] = [str(arglist) for arglist in doc["arglists"] or ()]

    return doc


__all__ = ["DROPPED_FIELDS", "format_tag", "munge_symbol"]
