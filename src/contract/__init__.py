"""Stable snapshot contract surface for docsnap.

Treat these exports as the authoritative description of what a snapshot
file contains.
"""

from contract.artifacts import (
    NAMESPACES_KEY,
    PROJECT_META_KEYS,
    SNAPSHOT_KEYS,
    SNAPSHOT_SUFFIX,
    snapshot_filename,
)


def __getattr__(name: str) -> object:
    if name in {"AggregateDocument", "SymbolRecord"}:
        from contract.models import AggregateDocument, SymbolRecord

        return {
            "AggregateDocument": AggregateDocument,
            "SymbolRecord": SymbolRecord,
        }[name]

    if name in {"ValidationMessage", "ValidationResult", "validate_snapshot"}:
        from contract.validation import (
            ValidationMessage,
            ValidationResult,
            validate_snapshot,
        )

        return {
            "ValidationMessage": ValidationMessage,
            "ValidationResult": ValidationResult,
            "validate_snapshot": validate_snapshot,
        }[name]

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "NAMESPACES_KEY",
    "PROJECT_META_KEYS",
    "SNAPSHOT_KEYS",
    "SNAPSHOT_SUFFIX",
    "AggregateDocument",
    "SymbolRecord",
    "ValidationMessage",
    "ValidationResult",
    "snapshot_filename",
    "validate_snapshot",
]
