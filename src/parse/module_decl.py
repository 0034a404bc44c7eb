"""Tree-sitter based module declaration reading for docsnap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tree_sitter import Language, Node, Parser
from tree_sitter_python import language as get_python_language

from utils import is_module_name, path_to_module

if TYPE_CHECKING:
    from pathlib import Path

_PARSER: Parser | None = None


class DeclarationError(Exception):
    """Raised when a source file's module declaration cannot be read."""


@dataclass(frozen=True)
class ModuleDecl:
    """The module a source file declares."""

    name: str
    is_package: bool


def _get_parser() -> Parser:
    """Initialize and return the Tree-sitter parser with Python language."""
    global _PARSER
    if _PARSER is None:
        lang = Language(get_python_language())
        _PARSER = Parser(lang)

    return _PARSER


def _first_error(node: Node) -> Node | None:
    """Return the first ERROR or missing node in document order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return node


def read_module_decl(file_path: Path, source_root: Path) -> ModuleDecl | None:
    """Read the module declared by a Python source file.

    The module name is implied by the file's location under ``source_root``.
    It is only trusted when the file parses cleanly.

    Args:
        file_path: Absolute path to the Python file
        source_root: Directory module names are relative to

    Returns:
        The declared module, or None when the path does not name an
        importable module.

    Raises:
        DeclarationError: If the file cannot be read or does not parse.
    """
    try:
        source_bytes = file_path.read_bytes()
    except OSError as exc:
        msg = f"cannot read {file_path}: {exc}"
        raise DeclarationError(msg) from exc

    tree = _get_parser().parse(source_bytes)
    error_node = _first_error(tree.root_node)
    if error_node is not None:
        line = error_node.start_point[0] + 1
        msg = f"syntax error in {file_path} at line {line}"
        raise DeclarationError(msg)

    try:
        relative_path = file_path.relative_to(source_root).as_posix()
        name = path_to_module(relative_path)
    except ValueError:
        return None

    if not is_module_name(name):
        return None

    return ModuleDecl(name=name, is_package=file_path.name == "__init__.py")


__all__ = ["DeclarationError", "ModuleDecl", "read_module_decl"]
