"""Shared utilities for docsnap."""

from __future__ import annotations

from pathlib import Path


def path_to_module(file_path: str | Path) -> str:
    """Convert a file path to a Python module name.

    Args:
        file_path: File path relative to a source root (e.g., "src/demo/core.py")

    Returns:
        Module name (e.g., "demo.core")

    Raises:
        ValueError: If the path does not name a non-empty module.

    Examples:
        >>> path_to_module("src/demo/core.py")
        'demo.core'
        >>> path_to_module("demo/__init__.py")
        'demo'
        >>> path_to_module(Path("foo/bar.py"))
        'foo.bar'
    """
    path_str = file_path.as_posix() if isinstance(file_path, Path) else str(file_path)
    normalized_parts = [part for part in path_str.replace("\\", "/").split("/") if part]

    # src/<package>/... maps to <package>.<submodules>.
    module_parts = (
        normalized_parts[1:]
        if len(normalized_parts) >= 2 and normalized_parts[0] == "src"
        else normalized_parts
    )

    if module_parts and module_parts[-1].endswith(".py"):
        module_parts[-1] = module_parts[-1][:-3]

    if module_parts and module_parts[-1] == "__init__":
        module_parts = module_parts[:-1]

    if not module_parts:
        msg = f"Path {path_str!r} does not name a non-empty module"
        raise ValueError(msg)

    return ".".join(module_parts)


def is_module_name(name: str) -> bool:
    """Return True when ``name`` is an importable dotted identifier."""
    return bool(name) and all(part.isidentifier() for part in name.split("."))
