"""Module loading for introspection."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from types import ModuleType, TracebackType

logger = logging.getLogger(__name__)

_INSTALL_DIRS = frozenset({"site-packages", "dist-packages"})


class ModuleLoader(Protocol):
    """Materializes a module by name so its symbols can be inspected."""

    def load(self, name: str) -> ModuleType: ...


def _locations(module: ModuleType | None) -> Iterator[Path]:
    if module is None:
        return
    candidates = [getattr(module, "__file__", None)]
    candidates.extend(getattr(module, "__path__", None) or ())
    for location in candidates:
        if location:
            yield Path(location).resolve()


class ScopedImporter:
    """Import modules from a set of search paths for the span of one run.

    Entering the importer puts the search paths at the front of ``sys.path``
    and hides already loaded modules whose top-level name is also defined
    under a search path, so the project's own module is imported instead.
    Leaving it restores ``sys.path``, evicts every module imported in between
    whose source lives under one of the search paths, and puts the hidden
    modules back. Installed packages (``site-packages``) are never evicted.
    With no search paths the importer resolves names against the host
    interpreter only.
    """

    def __init__(self, search_paths: Iterable[Path] = ()) -> None:
        self.search_paths = tuple(Path(p).resolve() for p in search_paths)
        self._saved_path: list[str] | None = None
        self._preloaded: frozenset[str] = frozenset()
        self._hidden: dict[str, ModuleType] = {}

    def __enter__(self) -> ScopedImporter:
        self._saved_path = list(sys.path)
        self._hidden = self._hide_shadowed()
        self._preloaded = frozenset(sys.modules)
        sys.path[:0] = [str(p) for p in self.search_paths]
        importlib.invalidate_caches()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._saved_path is not None:
            sys.path[:] = self._saved_path
            self._saved_path = None
        evicted = [
            name
            for name, module in list(sys.modules.items())
            if name not in self._preloaded and self._is_scoped(module)
        ]
        for name in evicted:
            del sys.modules[name]
        if evicted:
            logger.debug("Evicted %d scoped modules", len(evicted))
        sys.modules.update(self._hidden)
        self._hidden = {}

    def _top_level_names(self) -> set[str]:
        names: set[str] = set()
        for root in self.search_paths:
            if not root.is_dir():
                continue
            for entry in root.iterdir():
                if entry.is_dir():
                    name = entry.name
                elif entry.suffix == ".py":
                    name = entry.stem
                else:
                    continue
                if name.isidentifier():
                    names.add(name)
        return names

    def _hide_shadowed(self) -> dict[str, ModuleType]:
        top_level = self._top_level_names()
        hidden = {
            name: module
            for name, module in list(sys.modules.items())
            if name.partition(".")[0] in top_level and not self._is_scoped(module)
        }
        for name in hidden:
            del sys.modules[name]
        if hidden:
            logger.debug("Hid %d loaded modules shadowed by search paths", len(hidden))
        return hidden

    def _is_scoped(self, module: ModuleType | None) -> bool:
        if not self.search_paths:
            return False
        for location in _locations(module):
            if _INSTALL_DIRS.intersection(location.parts):
                continue
            if any(location.is_relative_to(root) for root in self.search_paths):
                return True
        return False

    def load(self, name: str) -> ModuleType:
        """Import ``name`` and return the module object.

        Raises:
            ImportError: ``name`` resolved to a module outside the search
                paths while search paths are set.
        """
        module = importlib.import_module(name)
        if self.search_paths and not self._is_scoped(module):
            origin = getattr(module, "__file__", None) or "<built-in>"
            msg = f"{name} resolved to {origin}, outside the source roots"
            raise ImportError(msg, name=name)
        return module


__all__ = ["ModuleLoader", "ScopedImporter"]
