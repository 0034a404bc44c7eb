"""Snapshot models exposed at the contract boundary."""

from artifacts.models.artifacts.snapshot import AggregateDocument
from artifacts.models.artifacts.symbols import SymbolRecord

__all__ = ["AggregateDocument", "SymbolRecord"]
