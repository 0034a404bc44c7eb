"""Symbol models for documentation snapshots.

This module contains the serializable record kept for every public symbol
of a resolved module.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SymbolKind = Literal["class", "function", "coroutine", "value"]


class SymbolRecord(BaseModel):
    """Documentation metadata for one public symbol."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    ns: str
    kind: SymbolKind | None = None
    doc: str | None = None
    arglists: list[str] = Field(default_factory=list)
    tag: str | None = Field(default=None, description="Printed type tag")
    line: int | None = None
    column: int | None = None
    file: str | None = None
    deprecated: str | None = None


__all__ = ["SymbolKind", "SymbolRecord"]
