"""
Pytest configuration and shared fixtures for jsonkind tests.

Provides immutable test case data and a minimal document model (object and
array classes) standing in for the one that consumes jsonkind.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
import pytest

import jsonkind


@dataclass(frozen=True)
class KindTestCase:
    """
    Immutable container for a classification test case.

    Holds the input value and the kind classify() must report for it.
    """

    description: str
    value: Any
    expected_kind: jsonkind.Kind


class Record(jsonkind.JSONObject):
    """Document-model object backed by a dict."""

    def __init__(
        self, items: dict[str, Any] | None = None, *, null: bool = False
    ) -> None:
        self._items = dict(items or {})
        self._null = null

    def is_null_object(self) -> bool:
        return self._null

    def keys(self) -> Iterator[str]:
        return iter(self._items)

    def get(self, key: str) -> Any:
        return self._items[key]

    def to_string(
        self, indent_factor: int | None = None, indent: int = 0
    ) -> str:
        if self._null:
            return "null"
        if not self._items:
            return "{}"
        if indent_factor is None:
            members = [
                f"{jsonkind.quote(key)}:{jsonkind.render(value)}"
                for key, value in self._items.items()
            ]
            return "{" + ",".join(members) + "}"

        inner = indent + indent_factor
        members = [
            f"{' ' * inner}{jsonkind.quote(key)}: "
            f"{jsonkind.render(value, indent_factor, inner)}"
            for key, value in self._items.items()
        ]
        return "{\n" + ",\n".join(members) + "\n" + " " * indent + "}"


class Items(jsonkind.JSONArray):
    """Document-model array backed by a list."""

    def __init__(self, values: list[Any] | None = None) -> None:
        self._values = list(values or [])

    def to_string(
        self, indent_factor: int | None = None, indent: int = 0
    ) -> str:
        if not self._values:
            return "[]"
        if indent_factor is None:
            return (
                "[" + ",".join(jsonkind.render(v) for v in self._values) + "]"
            )

        inner = indent + indent_factor
        elements = [
            f"{' ' * inner}{jsonkind.render(v, indent_factor, inner)}"
            for v in self._values
        ]
        return "[\n" + ",\n".join(elements) + "\n" + " " * indent + "]"


@pytest.fixture
def kind_cases() -> list[KindTestCase]:
    """
    Provides one or more representative values for every JSON kind.

    Includes the values whose kind depends on rule order, such as function
    literal text (a string that must classify as a function).
    """
    kind = jsonkind.Kind
    return [
        KindTestCase("None", None, kind.NULL),
        KindTestCase("null sentinel", jsonkind.NULL, kind.NULL),
        KindTestCase("null record", Record(null=True), kind.NULL),
        KindTestCase("list", [1, 2], kind.ARRAY),
        KindTestCase("empty tuple", (), kind.ARRAY),
        KindTestCase("set", {1, 2}, kind.ARRAY),
        KindTestCase("frozenset", frozenset(), kind.ARRAY),
        KindTestCase("numpy array", np.array([1.0, 2.0]), kind.ARRAY),
        KindTestCase("range", range(3), kind.ARRAY),
        KindTestCase(
            "function marker", jsonkind.JSONFunction(("a",), "a"), kind.FUNCTION
        ),
        KindTestCase(
            "function literal text", "function(a){return a;}", kind.FUNCTION
        ),
        KindTestCase(
            "spaced function literal", "function (a) {return a;}", kind.FUNCTION
        ),
        KindTestCase("true", True, kind.BOOLEAN),
        KindTestCase("numpy false", np.bool_(False), kind.BOOLEAN),
        KindTestCase("int", 42, kind.NUMBER),
        KindTestCase("float", 3.5, kind.NUMBER),
        KindTestCase("int8", np.int8(1), kind.NUMBER),
        KindTestCase("int16", np.int16(1), kind.NUMBER),
        KindTestCase("int32", np.int32(1), kind.NUMBER),
        KindTestCase("int64", np.int64(1), kind.NUMBER),
        KindTestCase("float32", np.float32(1.5), kind.NUMBER),
        KindTestCase("float64", np.float64(1.5), kind.NUMBER),
        KindTestCase("nan", float("nan"), kind.NUMBER),
        KindTestCase("text", "hello", kind.STRING),
        KindTestCase("single character", "x", kind.STRING),
        KindTestCase("empty text", "", kind.STRING),
        KindTestCase("function header only", "function(a)", kind.STRING),
        KindTestCase("dict", {"a": 1}, kind.OBJECT),
        KindTestCase("record", Record({"a": 1}), kind.OBJECT),
        KindTestCase("document array", Items([1]), kind.OBJECT),
        KindTestCase("plain object", object(), kind.OBJECT),
        KindTestCase("unsigned numpy int", np.uint8(1), kind.OBJECT),
    ]
