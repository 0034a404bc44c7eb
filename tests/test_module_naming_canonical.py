from __future__ import annotations

from pathlib import Path

import pytest

from parse.module_decl import DeclarationError, read_module_decl
from utils import is_module_name, path_to_module


def test_path_to_module_canonical_src_package_rules() -> None:
    assert path_to_module("src/demo/__init__.py") == "demo"
    assert path_to_module("src/demo/core.py") == "demo.core"
    assert path_to_module("src/demo/sub/tool.py") == "demo.sub.tool"


def test_path_to_module_fallback_rules_are_deterministic() -> None:
    assert path_to_module("pkg/module.py") == "pkg.module"
    assert path_to_module("pkg/__init__.py") == "pkg"
    assert path_to_module(Path("nested/feature/tool.py")) == "nested.feature.tool"


def test_path_to_module_rejects_empty_module_names() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        path_to_module("__init__.py")

    with pytest.raises(ValueError, match="non-empty"):
        path_to_module("src/__init__.py")


def test_is_module_name() -> None:
    assert is_module_name("demo.core")
    assert not is_module_name("")
    assert not is_module_name("my-tool.core")
    assert not is_module_name("demo..core")


def test_read_module_decl_uses_path_under_source_root(tmp_path: Path) -> None:
    package = tmp_path / "demo"
    package.mkdir()
    (package / "__init__.py").write_text("", encoding="utf-8")
    (package / "core.py").write_text("def greet(name):\n    pass\n", encoding="utf-8")

    core = read_module_decl(package / "core.py", tmp_path)
    init = read_module_decl(package / "__init__.py", tmp_path)

    assert core is not None
    assert core.name == "demo.core"
    assert not core.is_package
    assert init is not None
    assert init.name == "demo"
    assert init.is_package


def test_read_module_decl_rejects_syntax_errors(tmp_path: Path) -> None:
    broken = tmp_path / "broken.py"
    broken.write_text("x = 1\ndef oops(:\n    pass\n", encoding="utf-8")

    with pytest.raises(DeclarationError, match="line 2"):
        read_module_decl(broken, tmp_path)


def test_read_module_decl_unreadable_file(tmp_path: Path) -> None:
    with pytest.raises(DeclarationError, match="cannot read"):
        read_module_decl(tmp_path / "missing.py", tmp_path)


def test_read_module_decl_returns_none_for_unimportable_names(tmp_path: Path) -> None:
    script = tmp_path / "my-script.py"
    script.write_text("print('hi')\n", encoding="utf-8")

    assert read_module_decl(script, tmp_path) is None
