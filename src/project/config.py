from __future__ import annotations

import platform
from pathlib import Path
from typing import Any

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

PYPROJECT_FILENAME = "pyproject.toml"
TOOL_SECTION = "docsnap"

# Standard library files that act on import (open a browser, print, run a
# program) and are never resolved.
PYTHON_SKIP_FILES = frozenset(
    {
        "__main__.py",
        "antigravity.py",
        "this.py",
    }
)

PYTHON_EXCLUDE_PATTERNS = [
    "test/*",
    "idlelib/*",
    "turtledemo/*",
    "lib2to3/tests/*",
    "site-packages/*",
    "*/__main__.py",
]

_URL_KEYS = ("homepage", "home", "documentation")
_SCM_KEYS = ("repository", "source", "source code")


class ConfigError(Exception):
    """Raised when pyproject.toml exists but cannot be parsed."""


class ProjectDescriptor(BaseModel):
    """Project metadata supplied to snapshot generation."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str | None = None
    group: str | None = None
    url: str | None = None
    description: str | None = None
    version: str | None = None
    scm: str | None = None
    license: str | dict[str, Any] | None = None
    source_paths: list[str] = Field(default_factory=list)


class DocsnapSettings(BaseModel):
    """The ``[tool.docsnap]`` table of pyproject.toml."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source_paths: list[str] = Field(
        default_factory=list,
        alias="source-paths",
        description="Directories holding importable sources",
    )
    source_path: str | None = Field(
        default=None,
        alias="source-path",
        description="Single source directory, used when source-paths is empty",
    )
    group: str | None = Field(default=None, description="Project group identifier")
    skip_files: list[str] = Field(
        default_factory=list,
        alias="skip-files",
        description="File basenames that are never resolved",
    )
    include: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to include (empty = all Python files)",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns for files to exclude",
    )
    nested_gitignore: bool = Field(
        default=False,
        alias="nested-gitignore",
        description="Enable nested .gitignore composition",
    )

    @field_validator("skip_files")
    @classmethod
    def validate_skip_files(cls, v: list[str]) -> list[str]:
        """Skip entries are basenames, not paths."""
        for name in v:
            if "/" in name or "\\" in name:
                msg = f"skip-files entry '{name}' must be a file name, not a path"
                raise ValueError(msg)
        return v


def python_project() -> ProjectDescriptor:
    """Project metadata for the Python standard library itself."""
    return ProjectDescriptor(
        name="python",
        group="org.python",
        url="https://www.python.org",
        description="Python standard library and runtime",
        scm="https://github.com/python/cpython",
        license={
            "name": "Python Software Foundation License",
            "url": "https://docs.python.org/3/license.html",
        },
        version=platform.python_version(),
        source_paths=["Lib"],
    )


def _read_pyproject(root: Path) -> dict[str, Any]:
    config_path = Path(root) / PYPROJECT_FILENAME

    if not config_path.is_file():
        return {}

    try:
        with config_path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e


def _pick_url(urls: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    lowered = {str(k).lower(): v for k, v in urls.items()}
    for key in keys:
        if isinstance(lowered.get(key), str):
            return lowered[key]
    return None


def _default_source_paths(root: Path) -> list[str]:
    return ["src"] if (Path(root) / "src").is_dir() else ["."]


def load_settings(root: Path) -> DocsnapSettings:
    """Load the [tool.docsnap] table of pyproject.toml if there is one."""
    data = _read_pyproject(root)
    table = data.get("tool", {}).get(TOOL_SECTION, {})

    try:
        return DocsnapSettings.model_validate(table)
    except Exception as e:
        msg = f"Invalid [tool.{TOOL_SECTION}] in {Path(root) / PYPROJECT_FILENAME}: {e}"
        raise ConfigError(msg) from e


def load_project(root: Path) -> ProjectDescriptor:
    """Build a project descriptor from pyproject.toml.

    Missing metadata stays None. Snapshot generation proceeds with whatever
    is present.
    """
    data = _read_pyproject(root)
    settings = load_settings(root)
    project = data.get("project", {})
    if not isinstance(project, dict):
        msg = f"[project] in {Path(root) / PYPROJECT_FILENAME} must be a table"
        raise ConfigError(msg)

    urls = project.get("urls") or {}
    if not isinstance(urls, dict):
        msg = f"[project.urls] in {Path(root) / PYPROJECT_FILENAME} must be a table"
        raise ConfigError(msg)

    if settings.source_paths:
        source_paths = settings.source_paths
    elif settings.source_path:
        source_paths = [settings.source_path]
    else:
        source_paths = _default_source_paths(root)

    try:
        return ProjectDescriptor(
            name=project.get("name"),
            group=settings.group,
            url=_pick_url(urls, _URL_KEYS),
            description=project.get("description"),
            version=project.get("version"),
            scm=_pick_url(urls, _SCM_KEYS),
            license=project.get("license"),
            source_paths=source_paths,
        )
    except Exception as e:
        msg = f"Invalid [project] in {Path(root) / PYPROJECT_FILENAME}: {e}"
        raise ConfigError(msg) from e
