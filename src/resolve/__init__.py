"""Module resolution and symbol metadata for docsnap."""

from resolve.introspect import public_interns, symbol_meta
from resolve.loader import ModuleLoader, ScopedImporter
from resolve.namespaces import NamespaceOutcome, Resolved, Unresolved, read_namespace
from resolve.normalize import DROPPED_FIELDS, format_tag, munge_symbol

__all__ = [
    "DROPPED_FIELDS",
    "ModuleLoader",
    "NamespaceOutcome",
    "Resolved",
    "ScopedImporter",
    "Unresolved",
    "format_tag",
    "munge_symbol",
    "public_interns",
    "read_namespace",
    "symbol_meta",
]
