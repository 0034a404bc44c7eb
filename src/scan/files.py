"""Source discovery for docsnap."""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterator


@dataclass(frozen=True)
class SourceFile:
    """A Python file and the source root its module name is relative to."""

    path: Path
    root: Path

    @property
    def relative_path(self) -> str:
        return self.path.relative_to(self.root).as_posix()


def _matches_any(rel_path: str, patterns: list[str] | None) -> bool:
    return any(fnmatch(rel_path, pat) for pat in patterns or ())


def _is_within_root(path: Path, root: Path) -> bool:
    """Return True when the resolved path stays within the resolved root."""
    try:
        path.resolve().relative_to(root.resolve())
    except (OSError, ValueError):
        return False
    return True


def _should_include_file(
    path: Path,
    directory: Path,
    gitignore_matches: Callable[[str], bool] | None,
    include_patterns: list[str] | None,
    exclude_patterns: list[str] | None,
) -> bool:
    """Check if a file should be included based on all filtering rules."""
    if not path.is_file() or path.is_symlink():
        return False

    if not _is_within_root(path, directory):
        return False

    rel_path_str = path.relative_to(directory).as_posix()

    if gitignore_matches is not None and gitignore_matches(str(path)):
        return False

    if include_patterns and not _matches_any(rel_path_str, include_patterns):
        return False

    return not _matches_any(rel_path_str, exclude_patterns)


def _build_gitignore_matcher(
    root: Path,
    *,
    nested_gitignore: bool,
) -> Callable[[str], bool] | None:
    if not nested_gitignore:
        gitignore_path = root / ".gitignore"
        if gitignore_path.is_file():
            return cast("Callable[[str], bool]", parse_gitignore(gitignore_path))
        return None

    gitignore_paths = sorted(
        {
            path
            for path in [root / ".gitignore", *root.rglob(".gitignore")]
            if path.is_file() and not path.is_symlink()
        },
        key=lambda p: p.relative_to(root).as_posix(),
    )
    if not gitignore_paths:
        return None

    matchers = [parse_gitignore(path) for path in gitignore_paths]

    def matches(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                continue
        return False

    return matches


def find_python_files(
    directory: Path,
    *,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
) -> Iterator[Path]:
    """Find all Python files in a directory, respecting .gitignore.

    Args:
        directory: Directory to search for Python files
        include_patterns: Optional list of fnmatch patterns; if provided,
            files must match at least one pattern to be included
        exclude_patterns: Optional list of fnmatch patterns; files matching
            any pattern are excluded
        nested_gitignore: Also honour .gitignore files below ``directory``

    Yields:
        Path objects for each Python file found, sorted lexicographically
        by relative path.
    """
    if not directory.is_dir():
        return

    gitignore_matches = _build_gitignore_matcher(
        directory,
        nested_gitignore=nested_gitignore,
    )

    matched_files = [
        path
        for path in directory.rglob("*.py")
        if _should_include_file(
            path,
            directory,
            gitignore_matches,
            include_patterns,
            exclude_patterns,
        )
    ]

    matched_files.sort(key=lambda p: p.relative_to(directory).as_posix())

    yield from matched_files


def collect_source_files(
    directory: Path,
    *,
    skip_names: Collection[str] = frozenset(),
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
) -> list[SourceFile]:
    """Return the source files under ``directory`` minus skipped basenames."""
    return [
        SourceFile(path=path, root=directory)
        for path in find_python_files(
            directory,
            include_patterns=include_patterns,
            exclude_patterns=exclude_patterns,
            nested_gitignore=nested_gitignore,
        )
        if path.name not in skip_names
    ]


__all__ = ["SourceFile", "collect_source_files", "find_python_files"]
