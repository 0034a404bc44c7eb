"""Model namespace for docsnap snapshot schemas."""

from artifacts.models.artifacts.snapshot import AggregateDocument
from artifacts.models.artifacts.symbols import SymbolKind, SymbolRecord

__all__ = [
    "AggregateDocument",
    "SymbolKind",
    "SymbolRecord",
]
