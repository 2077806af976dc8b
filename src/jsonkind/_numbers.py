"""
Canonical number text and fixed-width numeric normalization.

Numbers are rendered from their default decimal form with redundant
trailing zeros and a dangling decimal point removed. Fixed-width numpy
scalars are normalized toward JSON's single number kind through a
read-only registry.
"""

from __future__ import annotations

import decimal
import functools
import math
import types
from collections.abc import Callable
from collections.abc import Mapping
from typing import Any
from typing import Final
from typing import TypeAlias

import numpy as np

from jsonkind._errors import InvalidNumberError

INT32_MAX: Final = 2147483647

Normalizer: TypeAlias = Callable[[Any], Any]


def check_validity(value: Any) -> None:
    """
    Raises InvalidNumberError if value is a NaN or infinite number.

    Anything that is not a float, numpy floating scalar or Decimal passes.
    """
    if isinstance(value, np.floating):
        # Stays in the scalar's own precision; longdouble may exceed float.
        finite = bool(np.isfinite(value))
    elif isinstance(value, float):
        finite = math.isfinite(value)
    elif isinstance(value, decimal.Decimal):
        finite = value.is_finite()
    else:
        return

    if not finite:
        msg = "JSON does not allow non-finite numbers"
        raise InvalidNumberError(msg, value)


def _strip_trailing_zeros(text: str) -> str:
    """Shaves trailing zeros and the decimal point off non-exponent text."""
    if text.find(".") > 0 and "e" not in text and "E" not in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text


def number_to_string(number: Any) -> str:
    """
    Produces canonical JSON text for a number.

    Raises:
        InvalidNumberError: number is None, NaN or infinite
    """
    if number is None:
        raise InvalidNumberError("Cannot render None as a number")
    check_validity(number)
    return _strip_trailing_zeros(str(number))


def double_to_string(d: float) -> str:
    """
    Produces canonical JSON text for a double.

    Unlike number_to_string, non-finite input yields the text ``null``
    instead of an error.
    """
    if math.isinf(d) or math.isnan(d):
        return "null"
    return _strip_trailing_zeros(str(d))


def _narrow_int64(value: np.int64) -> np.integer[Any]:
    # Only the upper bound is checked; values below INT32_MIN wrap.
    if value <= INT32_MAX:
        return value.astype(np.int32)
    return value


@functools.cache
def numeric_registry() -> Mapping[type, Normalizer]:
    """Returns the read-only map of fixed-width types to their normalizer."""
    return types.MappingProxyType(
        {
            np.float32: np.float64,
            np.int8: np.int32,
            np.int16: np.int32,
            np.int64: _narrow_int64,
        }
    )


def transform_number(number: Any) -> Any:
    """
    Normalizes a fixed-width number toward a valid JavaScript number.

    float32 is promoted to float64, int8 and int16 to int32, and int64 is
    narrowed to int32 when it fits. Every other value, including plain int
    and float, is returned unchanged.
    """
    normalize = numeric_registry().get(type(number))
    if normalize is None:
        return number
    return normalize(number)
