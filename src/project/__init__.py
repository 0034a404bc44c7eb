"""Project metadata and configuration for docsnap."""

from project.config import (
    PYTHON_EXCLUDE_PATTERNS,
    PYTHON_SKIP_FILES,
    ConfigError,
    DocsnapSettings,
    ProjectDescriptor,
    load_project,
    load_settings,
    python_project,
)

__all__ = [
    "PYTHON_EXCLUDE_PATTERNS",
    "PYTHON_SKIP_FILES",
    "ConfigError",
    "DocsnapSettings",
    "ProjectDescriptor",
    "load_project",
    "load_settings",
    "python_project",
]
