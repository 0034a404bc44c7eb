"""Project snapshot models.

The aggregate document is the whole content of one ``.json.gz`` snapshot:
the indexed project metadata plus every resolved module's symbols.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from artifacts.models.artifacts.symbols import SymbolRecord

License = str | dict[str, Any]


class AggregateDocument(BaseModel):
    """Project metadata merged with per-module symbol records."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str | None = None
    url: str | None = None
    description: str | None = None
    version: str | None = None
    group: str | None = None
    scm: str | None = None
    license: License | None = None
    namespaces: dict[str, list[SymbolRecord]] = Field(default_factory=dict)


__all__ = ["AggregateDocument", "License"]
