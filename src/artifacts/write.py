from __future__ import annotations

import logging
from itertools import chain
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.aggregate import generate_all_data
from artifacts.utils import _write_json_gz
from contract.artifacts import snapshot_filename
from project.config import (
    PYTHON_EXCLUDE_PATTERNS,
    PYTHON_SKIP_FILES,
    load_project,
    load_settings,
    python_project,
)
from resolve.loader import ScopedImporter
from scan.files import collect_source_files

if TYPE_CHECKING:
    from artifacts.models.artifacts.snapshot import AggregateDocument

logger = logging.getLogger(__name__)


def serialize_project_info(
    document: AggregateDocument,
    out_dir: Path | None = None,
) -> Path:
    """Write the snapshot to ``<name>-<version>.json.gz``.

    Args:
        document: Aggregate document to serialize
        out_dir: Directory to write into (default: current working directory)

    Returns:
        Path of the written snapshot. An existing file is overwritten.
    """
    filename = snapshot_filename(document.name, document.version)
    target = (out_dir if out_dir is not None else Path.cwd()) / filename
    logger.info("[-] Writing output to %s", filename)
    _write_json_gz(target, document)
    return target


def gen_project_docs(root: Path, *, out_dir: Path | None = None) -> Path:
    """Generate a snapshot for the project described by ``root/pyproject.toml``.

    Args:
        root: Project root holding pyproject.toml
        out_dir: Optional output directory (default: current working directory)

    Returns:
        Path of the written snapshot.
    """
    project = load_project(root)
    settings = load_settings(root)
    source_roots = [(root / path).resolve() for path in project.source_paths]

    source_files = list(
        chain.from_iterable(
            collect_source_files(
                source_root,
                skip_names=frozenset(settings.skip_files),
                include_patterns=settings.include or None,
                exclude_patterns=settings.exclude or None,
                nested_gitignore=settings.nested_gitignore,
            )
            for source_root in source_roots
        )
    )

    with ScopedImporter(source_roots) as loader:
        document = generate_all_data(project, source_files, loader)

    target = serialize_project_info(document, out_dir)
    logger.info("[=] Done.")
    return target


def gen_python_docs(cpython_dir: Path, *, out_dir: Path | None = None) -> Path:
    """Generate a snapshot of the Python standard library.

    Module names come from ``cpython_dir/Lib`` but are imported from the
    running interpreter, whose version also names the snapshot.
    """
    lib_dir = cpython_dir / "Lib"
    source_files = collect_source_files(
        lib_dir,
        skip_names=PYTHON_SKIP_FILES,
        exclude_patterns=PYTHON_EXCLUDE_PATTERNS,
    )

    with ScopedImporter() as loader:
        document = generate_all_data(python_project(), source_files, loader)

    target = serialize_project_info(document, out_dir)
    logger.info("[=] Done.")
    return target


__all__ = ["gen_project_docs", "gen_python_docs", "serialize_project_info"]
