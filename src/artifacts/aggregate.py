"""Aggregate per-module symbol records into one project snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from artifacts.models.artifacts.snapshot import AggregateDocument
from contract.artifacts import PROJECT_META_KEYS
from resolve.namespaces import read_namespace

if TYPE_CHECKING:
    from collections.abc import Iterable

    from artifacts.models.artifacts.symbols import SymbolRecord
    from project.config import ProjectDescriptor
    from resolve.loader import ModuleLoader
    from scan.files import SourceFile


def project_meta(project: ProjectDescriptor) -> dict[str, Any]:
    """Return the project information that is indexed."""
    return {key: getattr(project, key, None) for key in PROJECT_META_KEYS}


def generate_all_data(
    project: ProjectDescriptor,
    source_files: Iterable[SourceFile],
    loader: ModuleLoader,
) -> AggregateDocument:
    """Build the snapshot document for a project and its source files.

    Files are resolved in order. A later file that declares an already seen
    module replaces that module's records.
    """
    namespaces: dict[str, list[SymbolRecord]] = {}
    for source_file in source_files:
        namespaces.update(read_namespace(source_file, loader).module_result())

    return AggregateDocument(**project_meta(project), namespaces=namespaces)


__all__ = ["generate_all_data", "project_meta"]
