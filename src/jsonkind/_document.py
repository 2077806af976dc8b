"""
Value types shared with the JSON document model.

The null sentinel and the function-literal marker are concrete. The
object, array and custom-rendering types are abstract: the document model
supplies the implementations and this package only asks them questions.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any
from typing import Final

from jsonkind._matcher import function_matchers


class JSONNull:
    """
    Marker for JSON's ``null`` literal, distinct from Python's None.

    Only one instance exists; use the module-level ``NULL``.
    """

    _instance: JSONNull | None = None

    def __new__(cls) -> JSONNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"

    def __repr__(self) -> str:
        return "NULL"

    def __reduce__(self) -> str:
        return "NULL"


NULL: Final = JSONNull()


@dataclass(frozen=True)
class JSONFunction:
    """
    JavaScript function literal carried as a value.

    Renders verbatim rather than as an escaped string, which makes the
    output non-conformant JSON.
    """

    params: tuple[str, ...] = ()
    text: str = ""

    @classmethod
    def parse(cls, literal: str) -> JSONFunction:
        """
        Builds a function from its literal text.

        Raises:
            ValueError: literal is not a function literal
        """
        parts = function_matchers().parts
        params = parts.get_group_if_matches(literal, 1)
        text = parts.get_group_if_matches(literal, 2)
        if params is None or text is None:
            raise ValueError(f"Not a function literal: {literal!r}")

        names = tuple(name.strip() for name in params.split(","))
        return cls(tuple(name for name in names if name), text.strip())

    def __str__(self) -> str:
        body = f" {self.text} " if self.text else ""
        return f"function({','.join(self.params)}){{{body}}}"


class JSONObject(abc.ABC):
    """Document-model object: keyed values that render themselves."""

    @abc.abstractmethod
    def is_null_object(self) -> bool:
        """Returns True if this object stands for JSON null."""

    @abc.abstractmethod
    def keys(self) -> Iterable[str]: ...

    @abc.abstractmethod
    def get(self, key: str) -> Any: ...

    @abc.abstractmethod
    def to_string(
        self, indent_factor: int | None = None, indent: int = 0
    ) -> str:
        """
        Renders the object as JSON text.

        Compact when indent_factor is None, otherwise pretty-printed with
        indent_factor spaces per level starting at indent.
        """


class JSONArray(abc.ABC):
    """Document-model array that renders itself."""

    @abc.abstractmethod
    def to_string(
        self, indent_factor: int | None = None, indent: int = 0
    ) -> str:
        """Renders the array as JSON text, compact or pretty like JSONObject."""


class JSONString(abc.ABC):
    """
    Values that produce their own JSON text.

    Any class defining ``to_json_string()`` counts, without subclassing,
    the same way ``collections.abc`` recognizes its protocols.
    """

    __slots__ = ()

    @abc.abstractmethod
    def to_json_string(self) -> Any:
        """Returns the JSON text; anything other than str is an error."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> bool | Any:
        if cls is JSONString:
            for base in subclass.__mro__:
                if "to_json_string" in base.__dict__:
                    # Setting the method to None opts out.
                    if base.__dict__["to_json_string"] is None:
                        return NotImplemented
                    return True
        return NotImplemented
