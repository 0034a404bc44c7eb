"""Validation helpers for docsnap snapshots."""

from __future__ import annotations

import gzip
import zlib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from contract.artifacts import NAMESPACES_KEY, SNAPSHOT_KEYS, snapshot_filename
from contract.models import AggregateDocument
from resolve.normalize import DROPPED_FIELDS

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class ValidationMessage:
    path: Path
    message: str
    namespace: str | None = None

    def location(self) -> str:
        if self.namespace is None:
            return str(self.path)
        return f"{self.path}[{self.namespace}]"


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _read_payload(path: Path, result: ValidationResult) -> Any:
    try:
        with gzip.open(path, "rb") as handle:
            raw = handle.read()
    except (OSError, EOFError, zlib.error) as exc:
        result.errors.append(
            ValidationMessage(path=path, message=f"Failed to decompress: {exc}.")
        )
        return None

    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        result.errors.append(ValidationMessage(path=path, message=f"Invalid JSON: {exc}."))
        return None


def _check_keys(path: Path, data: dict[str, Any], result: ValidationResult) -> None:
    missing = sorted(SNAPSHOT_KEYS - data.keys())
    extra = sorted(data.keys() - SNAPSHOT_KEYS)
    if missing:
        result.errors.append(
            ValidationMessage(
                path=path, message=f"Missing top-level keys: {', '.join(missing)}."
            )
        )
    if extra:
        result.errors.append(
            ValidationMessage(
                path=path, message=f"Unexpected top-level keys: {', '.join(extra)}."
            )
        )


def _check_dropped_fields(
    path: Path, namespaces: Any, result: ValidationResult
) -> None:
    if not isinstance(namespaces, dict):
        return
    for namespace, records in namespaces.items():
        if not isinstance(records, list):
            continue
        for record in records:
            if not isinstance(record, dict):
                continue
            leaked = sorted(DROPPED_FIELDS & record.keys())
            if leaked:
                result.errors.append(
                    ValidationMessage(
                        path=path,
                        namespace=namespace,
                        message=(
                            f"Symbol {record.get('name')!r} keeps unindexable "
                            f"fields: {', '.join(leaked)}."
                        ),
                    )
                )


def validate_snapshot(path: Path) -> ValidationResult:
    """Check that a snapshot file decodes to a well-formed aggregate document."""
    result = ValidationResult()

    if not path.is_file():
        result.errors.append(
            ValidationMessage(path=path, message="Snapshot file does not exist.")
        )
        return result

    data = _read_payload(path, result)
    if data is None:
        return result

    if not isinstance(data, dict):
        result.errors.append(
            ValidationMessage(path=path, message="Expected a JSON object.")
        )
        return result

    _check_keys(path, data, result)
    _check_dropped_fields(path, data.get(NAMESPACES_KEY), result)

    try:
        document = AggregateDocument.model_validate(
            {key: value for key, value in data.items() if key in SNAPSHOT_KEYS}
        )
    except ValidationError as exc:
        result.errors.append(
            ValidationMessage(path=path, message=f"Schema validation failed: {exc}.")
        )
        return result

    expected = snapshot_filename(document.name, document.version)
    if path.name != expected:
        result.warnings.append(
            ValidationMessage(
                path=path,
                message=f"Filename does not match project identity (expected {expected}).",
            )
        )

    for namespace, records in document.namespaces.items():
        if not records:
            result.warnings.append(
                ValidationMessage(
                    path=path, namespace=namespace, message="Module has no symbols."
                )
            )

    return result


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_snapshot",
]
