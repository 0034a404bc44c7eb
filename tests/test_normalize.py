import inspect
from collections import OrderedDict
from typing import Callable, Optional

import pytest

from resolve.normalize import DROPPED_FIELDS, format_tag, munge_symbol


def _signature(func: object) -> inspect.Signature:
    return inspect.signature(func)  # type: ignore[arg-type]


def _sample(name: str) -> None:
    pass


def _raw_record(**overrides: object) -> dict[str, object]:
    record: dict[str, object] = {
        "name": "greet",
        "ns": "demo.core",
        "doc": "Greets.",
        "arglists": [_signature(_sample)],
        "tag": int,
        "line": 3,
        "column": 1,
        "file": "/tmp/demo/core.py",
        "protocol": object,
        "inline": _sample,
        "inline_arities": frozenset({1}),
    }
    record.update(overrides)
    return record


def test_munge_symbol_drops_unindexable_fields() -> None:
    munged = munge_symbol(_raw_record())

    assert not DROPPED_FIELDS & munged.keys()
    assert munged["line"] == 3
    assert munged["file"] == "/tmp/demo/core.py"


def test_munge_symbol_stringifies_names_and_arglists() -> None:
    munged = munge_symbol(_raw_record())

    assert munged["name"] == "greet"
    assert munged["ns"] == "demo.core"
    assert munged["arglists"] == ["(name: str) -> None"]
    assert munged["tag"] == "int"


def test_munge_symbol_is_idempotent() -> None:
    once = munge_symbol(_raw_record(tag=Optional[int]))
    twice = munge_symbol(once)

    assert twice == once


def test_munge_symbol_keeps_missing_tag_null() -> None:
    without_tag = munge_symbol({"name": "x", "ns": "demo"})
    null_tag = munge_symbol({"name": "x", "ns": "demo", "tag": None})

    assert "tag" not in without_tag
    assert null_tag["tag"] is None


def test_munge_symbol_leaves_absent_keys_absent() -> None:
    munged = munge_symbol({"name": "VALUE", "ns": "demo", "inline": 3})

    assert munged == {"name": "VALUE", "ns": "demo"}


def test_munge_symbol_turns_null_arglists_into_empty_list() -> None:
    assert munge_symbol({"name": "f", "ns": "demo", "arglists": None})["arglists"] == []


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        (None, None),
        ("list[str]", "list[str]"),
        (str, "str"),
        (OrderedDict, "collections.OrderedDict"),
        (list[int], "list[int]"),
        (Callable[[int], str], "Callable[[int], str]"),
    ],
)
def test_format_tag(tag: object, expected: str | None) -> None:
    assert format_tag(tag) == expected


def test_format_tag_never_prints_null() -> None:
    assert format_tag(None) not in {"None", "null", "nil"}
