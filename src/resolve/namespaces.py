"""Resolve source files to the documented symbols of the modules they declare."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from artifacts.models.artifacts.symbols import SymbolRecord
from parse.module_decl import read_module_decl
from resolve.introspect import public_interns, symbol_meta
from resolve.normalize import munge_symbol

if TYPE_CHECKING:
    from pathlib import Path

    from resolve.loader import ModuleLoader
    from scan.files import SourceFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolved:
    """A source file whose module was loaded and inspected."""

    module: str
    symbols: tuple[SymbolRecord, ...] = field(default_factory=tuple)

    def module_result(self) -> dict[str, list[SymbolRecord]]:
        return {self.module: list(self.symbols)}


@dataclass(frozen=True)
class Unresolved:
    """A source file that contributes nothing to the snapshot."""

    path: Path
    reason: str

    def module_result(self) -> dict[str, list[SymbolRecord]]:
        return {}


NamespaceOutcome = Resolved | Unresolved


def _unresolved(source: SourceFile, error: BaseException | str) -> Unresolved:
    reason = error if isinstance(error, str) else repr(error)
    logger.warning("Unable to parse (%s): %s", source.path, reason)
    return Unresolved(path=source.path, reason=reason)


def read_namespace(source: SourceFile, loader: ModuleLoader) -> NamespaceOutcome:
    """Load the module a source file declares and collect its public symbols.

    Failures while reading the declaration, importing the module or
    inspecting its symbols are logged and reported as ``Unresolved``; they
    never abort the caller.
    """
    try:
        decl = read_module_decl(source.path, source.root)
    except Exception as exc:
        logger.info("[+] Processing %s...", source.path)
        return _unresolved(source, exc)

    if decl is None:
        logger.info("[+] Processing %s...", source.path)
        return _unresolved(source, "no module declaration")

    logger.info("[+] Processing %s...", decl.name)
    try:
        module = loader.load(decl.name)
        symbols = [
            SymbolRecord.model_validate(munge_symbol(symbol_meta(module, name, obj)))
            for name, obj in public_interns(module).items()
        ]
    # Modules may call sys.exit() at import time.
    except (Exception, SystemExit) as exc:
        return _unresolved(source, exc)

    symbols.sort(key=lambda record: record.name)
    return Resolved(module=decl.name, symbols=tuple(symbols))


__all__ = ["NamespaceOutcome", "Resolved", "Unresolved", "read_namespace"]
