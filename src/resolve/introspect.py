"""Raw symbol metadata from loaded modules.

The records produced here still hold live Python objects (signatures,
annotations, the symbol itself). ``resolve.normalize`` turns them into
serializable records.
"""

from __future__ import annotations

import inspect
import sys
import typing
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from types import ModuleType


def _defined_in(module: ModuleType, obj: object) -> bool:
    """Return True when ``obj`` comes from the source file of ``module``."""
    module_file = getattr(module, "__file__", None)
    try:
        obj_file = inspect.getsourcefile(obj)  # type: ignore[arg-type]
    except (TypeError, OSError):
        return False
    if not module_file or not obj_file:
        return False
    return Path(obj_file).resolve() == Path(module_file).resolve()


def _is_reexport(module: ModuleType, name: str, obj: object) -> bool:
    """Return True when ``obj`` is another module's binding imported here.

    An object counts as imported when its owning module binds it under the
    same name or under its own ``__name__``. Functions wrapped by a foreign
    decorator report the decorator's module as owner but are bound there
    under neither name, so they stay public.
    """
    owner = getattr(obj, "__module__", None)
    if not isinstance(owner, str) or owner == module.__name__:
        return False
    if _defined_in(module, obj):
        return False
    source = sys.modules.get(owner)
    if source is None:
        return inspect.isroutine(obj) or inspect.isclass(obj)
    names = {name, getattr(obj, "__name__", name)}
    return any(
        isinstance(candidate, str) and getattr(source, candidate, None) is obj
        for candidate in names
    )


def public_interns(module: ModuleType) -> dict[str, object]:
    """Return the public top-level bindings a module defines.

    ``__all__`` is authoritative when the module declares it. Otherwise the
    public names are those without a leading underscore that are neither
    submodules nor re-exports of another module's objects.
    """
    namespace = vars(module)
    declared = namespace.get("__all__")
    if declared is not None:
        return {
            str(name): namespace[name]
            for name in declared
            if isinstance(name, str) and name in namespace
        }

    return {
        name: obj
        for name, obj in namespace.items()
        if not name.startswith("_")
        and not inspect.ismodule(obj)
        and not _is_reexport(module, name, obj)
    }


def _kind(obj: object) -> str:
    if inspect.isclass(obj):
        return "class"
    if inspect.iscoroutinefunction(obj):
        return "coroutine"
    if inspect.isroutine(obj):
        return "function"
    return "value"


def _signatures(obj: object) -> list[inspect.Signature]:
    overloads: list[Any] = []
    if inspect.isfunction(obj):
        overloads = list(typing.get_overloads(obj))
    targets = overloads or [obj]
    signatures = []
    for target in targets:
        try:
            signatures.append(inspect.signature(target))
        except (TypeError, ValueError):
            continue
    return signatures


def _arities(signatures: list[inspect.Signature]) -> frozenset[int] | None:
    arities: set[int] = set()
    for signature in signatures:
        required = optional = 0
        for param in signature.parameters.values():
            if param.kind is param.VAR_POSITIONAL:
                return None
            if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
                if param.default is param.empty:
                    required += 1
                else:
                    optional += 1
        arities.update(range(required, required + optional + 1))
    return frozenset(arities)


def _location(obj: object) -> dict[str, Any]:
    location: dict[str, Any] = {}
    try:
        location["file"] = inspect.getsourcefile(obj)  # type: ignore[arg-type]
        lines, lineno = inspect.getsourcelines(obj)  # type: ignore[arg-type]
    except (OSError, TypeError):
        return location
    if lines:
        first = lines[0]
        location["line"] = max(lineno, 1)
        location["column"] = len(first) - len(first.lstrip()) + 1
    return location


def symbol_meta(module: ModuleType, name: str, obj: object) -> dict[str, Any]:
    """Return raw metadata for one public binding of ``module``."""
    kind = _kind(obj)
    meta: dict[str, Any] = {
        "name": name,
        "ns": module.__name__,
        "kind": kind,
        "inline": obj,
    }

    if kind == "value":
        meta["doc"] = None
        meta["file"] = getattr(module, "__file__", None)
        annotations = getattr(module, "__annotations__", None) or {}
        if name in annotations:
            meta["tag"] = annotations[name]
    else:
        meta["doc"] = inspect.getdoc(obj)
        meta.update(_location(obj))
        signatures = _signatures(obj)
        meta["arglists"] = signatures
        if kind != "class":
            meta["inline_arities"] = _arities(signatures)
            if signatures and signatures[0].return_annotation is not inspect.Signature.empty:
                meta["tag"] = signatures[0].return_annotation

    if inspect.isclass(obj) and getattr(obj, "_is_protocol", False):
        meta["protocol"] = obj

    deprecated = getattr(obj, "__deprecated__", None)
    if isinstance(deprecated, str):
        meta["deprecated"] = deprecated

    return meta


__all__ = ["public_interns", "symbol_meta"]
