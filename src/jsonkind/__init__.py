"""
JSON value classification and scalar rendering.

Decides which of the seven JSON kinds an arbitrary Python value belongs to
and produces the exact text a JSON serializer must emit for scalars:
numbers, escaped strings and JavaScript function literals. Objects and
arrays are rendered by the document model that owns them.
"""

import decimal
import logging
import os
import time
from collections.abc import Callable
from collections.abc import Sequence
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import Final
from typing import TypeAlias

import numpy as np

from jsonkind._document import NULL
from jsonkind._document import JSONArray
from jsonkind._document import JSONFunction
from jsonkind._document import JSONNull
from jsonkind._document import JSONObject
from jsonkind._document import JSONString
from jsonkind._errors import InvalidNumberError
from jsonkind._errors import JSONError
from jsonkind._errors import MalformedCustomRenderingError
from jsonkind._matcher import RegexpMatcher
from jsonkind._matcher import function_matchers
from jsonkind._numbers import check_validity
from jsonkind._numbers import double_to_string
from jsonkind._numbers import number_to_string
from jsonkind._numbers import numeric_registry
from jsonkind._numbers import transform_number

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JSONKIND_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling classification and rendering hot paths."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments to nullcontext
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class Kind(Enum):
    """
    The seven mutually exclusive JSON value categories.

    Closed on purpose: classify() must stay total and exclusive, so a new
    kind means a new rule in the ordered chain, not a new subclass.
    """

    NULL = "null"
    ARRAY = "array"
    FUNCTION = "function"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"

    @property
    def type_class(self) -> type:
        """Canonical Python type for values of this kind."""
        return _TYPE_CLASSES[self]


_TYPE_CLASSES: Final[dict[Kind, type]] = {
    Kind.NULL: object,
    Kind.ARRAY: list,
    Kind.FUNCTION: JSONFunction,
    Kind.BOOLEAN: bool,
    Kind.NUMBER: float,
    Kind.STRING: str,
    Kind.OBJECT: object,
}

# Matched by exact type; subclasses and bool are not numbers.
_NUMBER_TYPES: Final = frozenset(
    {
        int,
        float,
        np.int8,
        np.int16,
        np.int32,
        np.int64,
        np.float32,
        np.float64,
    }
)

_SHORT_ESCAPES: Final = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


@dataclass(frozen=True)
class RenderConfig:
    """
    Configures value rendering with immutable settings.

    indent_factor None selects the compact form; any other value selects
    the pretty form, which hands both settings to nested objects and arrays.
    """

    indent_factor: int | None = None
    indent: int = 0

    def __post_init__(self) -> None:
        if self.indent_factor is not None:
            if not isinstance(self.indent_factor, int) or isinstance(
                self.indent_factor, bool
            ):
                raise TypeError("indent_factor must be an integer or None")
            if self.indent_factor < 0:
                raise ValueError("indent_factor must be non-negative")
        if not isinstance(self.indent, int) or isinstance(self.indent, bool):
            raise TypeError("indent must be an integer")
        if self.indent < 0:
            raise ValueError("indent must be non-negative")

    @property
    def pretty(self) -> bool:
        return self.indent_factor is not None


def is_null(value: Any) -> bool:
    """Tests if value stands for JSON null: None, NULL or a null JSONObject."""
    if isinstance(value, JSONObject):
        return value.is_null_object()
    return value is None or value is NULL


def is_array(value: Any) -> bool:
    """
    Tests if value is an array or collection of values.

    Purely type-shape based: sequences, sets and numpy arrays qualify;
    text, mappings and document-model wrappers do not.
    """
    if isinstance(value, str | JSONObject | JSONArray):
        return False
    return isinstance(value, np.ndarray | Sequence | AbstractSet)


def is_function(value: Any) -> bool:
    """Tests if value is a JSONFunction or text of a whole function literal."""
    if isinstance(value, JSONFunction):
        return True
    if isinstance(value, str):
        return function_matchers().literal.matches(value)
    return False


def is_function_header(value: Any) -> bool:
    """Tests if value is text of a function header like ``function(a, b)``."""
    if isinstance(value, str):
        return function_matchers().header.matches(value)
    return False


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool | np.bool_)


def is_number(value: Any) -> bool:
    """Tests if value is a plain or fixed-width numpy int or float."""
    return type(value) in _NUMBER_TYPES


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_object(value: Any) -> bool:
    """
    Tests if value is not a boolean, number, string or array.

    NULL and null JSONObjects are objects here too, even though classify()
    reports them as Kind.NULL.
    """
    return (
        not is_number(value)
        and not is_string(value)
        and not is_boolean(value)
        and not is_array(value)
    ) or is_null(value)


_Rule: TypeAlias = tuple[Callable[[Any], bool], Kind]

# Order matters: the first predicate that holds decides the kind.
_CLASSIFICATION_RULES: Final[tuple[_Rule, ...]] = (
    (is_null, Kind.NULL),
    (is_array, Kind.ARRAY),
    (is_function, Kind.FUNCTION),
    (is_boolean, Kind.BOOLEAN),
    (is_number, Kind.NUMBER),
    (is_string, Kind.STRING),
)


def classify(value: Any) -> Kind:
    """
    Returns the JSON kind of any value.

    Applies null, array, function, boolean, number and string tests in that
    order; anything left over is an object.
    """
    with ProfileContext("classify"):
        for predicate, kind in _CLASSIFICATION_RULES:
            if predicate(value):
                return kind
        return Kind.OBJECT


def type_class_of(value: Any) -> type:
    """Returns the canonical Python type for the JSON kind of value."""
    return classify(value).type_class


def property_kinds(record: JSONObject) -> dict[str, type]:
    """Maps every key of record to the canonical type of its value."""
    return {key: type_class_of(record.get(key)) for key in record.keys()}


def get_function_params(text: str) -> str | None:
    """Returns the parameter list of a function header, or None."""
    return function_matchers().params.get_group_if_matches(text, 1)


def may_be_json(text: str | None) -> bool:
    """Tests if text looks like a JSON null, object or array."""
    return text is not None and (
        text.lower() == "null"
        or (text.startswith("[") and text.endswith("]"))
        or (text.startswith("{") and text.endswith("}"))
    )


def quote(text: str | None) -> str:
    """
    Produces a double-quoted JSON string with the right backslash escapes.

    A backslash is inserted within ``</`` so the text can be embedded in
    HTML. Function literals are returned untouched, which yields
    non-conformant JSON.
    """
    if not text:
        return '""'
    if is_function(text):
        return text

    with ProfileContext("quote", len(text)):
        result = ['"']
        previous = ""
        for char in text:
            if char == "\\" or char == '"':
                result.append("\\")
                result.append(char)
            elif char == "/":
                if previous == "<":
                    result.append("\\")
                result.append(char)
            elif char in _SHORT_ESCAPES:
                result.append(_SHORT_ESCAPES[char])
            elif char < " ":
                result.append(f"\\u{ord(char):04x}")
            else:
                result.append(char)
            previous = char
        result.append('"')
        return "".join(result)


def _is_renderable_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(
        value, int | float | decimal.Decimal | np.integer | np.floating
    )


def _custom_rendering(value: Any, config: RenderConfig) -> str | None:
    """
    Runs value.to_json_string().

    The compact form raises on failure or non-text results. The pretty form
    ignores both and returns None so rendering falls through to the
    remaining rules.
    """
    if config.pretty:
        try:
            rendered = value.to_json_string()
        except Exception:
            logger.debug(
                "Ignoring failed to_json_string() of %s",
                type(value).__name__,
                exc_info=True,
            )
            return None
        if isinstance(rendered, str):
            return rendered
        logger.debug(
            "Ignoring non-text to_json_string() result of %s: %r",
            type(value).__name__,
            rendered,
        )
        return None

    try:
        rendered = value.to_json_string()
    except Exception as e:
        msg = f"to_json_string() of {type(value).__name__} failed: {e}"
        raise MalformedCustomRenderingError(msg, value) from e
    if not isinstance(rendered, str):
        msg = f"Bad value from to_json_string(): {rendered!r}"
        raise MalformedCustomRenderingError(msg, value)
    return rendered


def _render_value(value: Any, config: RenderConfig) -> str:  # noqa: PLR0911
    """Renders any value following the renderer's precedence rules."""
    if is_null(value):
        return "null"
    if isinstance(value, JSONFunction):
        return str(value)
    if isinstance(value, JSONString):
        rendered = _custom_rendering(value, config)
        if rendered is not None:
            return rendered
    if _is_renderable_number(value):
        return number_to_string(value)
    if is_boolean(value):
        return "true" if value else "false"
    if isinstance(value, JSONObject | JSONArray):
        if config.pretty:
            return value.to_string(config.indent_factor, config.indent)
        return value.to_string()
    return quote(str(value))


def render(
    value: Any, indent_factor: int | None = None, indent: int = 0
) -> str:
    """
    Makes the JSON text of a value.

    Compact by default; passing indent_factor selects the pretty form, in
    which nested objects and arrays are indented by indent_factor spaces per
    level starting at indent. The value graph must be acyclic.

    Raises:
        InvalidNumberError: value is a NaN or infinite number
        MalformedCustomRenderingError: compact form only, value's
            to_json_string() failed or did not return text
    """
    config = RenderConfig(indent_factor=indent_factor, indent=indent)
    with ProfileContext("render"):
        return _render_value(value, config)


__all__ = [
    "NULL",
    "HotPathStats",
    "InvalidNumberError",
    "JSONArray",
    "JSONError",
    "JSONFunction",
    "JSONNull",
    "JSONObject",
    "JSONString",
    "Kind",
    "MalformedCustomRenderingError",
    "RegexpMatcher",
    "RenderConfig",
    "check_validity",
    "classify",
    "clear_hot_path_stats",
    "double_to_string",
    "function_matchers",
    "get_function_params",
    "get_hot_path_stats",
    "is_array",
    "is_boolean",
    "is_function",
    "is_function_header",
    "is_null",
    "is_number",
    "is_object",
    "is_string",
    "may_be_json",
    "number_to_string",
    "numeric_registry",
    "property_kinds",
    "quote",
    "render",
    "transform_number",
    "type_class_of",
]
