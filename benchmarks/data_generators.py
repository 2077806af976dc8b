"""
Test data generators for scalar rendering benchmarks.

Creates lists of scalar values shaped for performance testing:
- Numbers with and without trailing zeros
- Plain text and text heavy with characters needing escapes
- Mixed scalars of every renderable kind
"""

import random
import string
from typing import Any

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3
_SAMPLE_SIZE = 500


def generate_test_values(data_type: str) -> list[Any]:
    """Generates scalar values based on specified type."""
    generators = {
        "numbers": _generate_numbers,
        "plain_strings": _generate_plain_strings,
        "escape_heavy": _generate_escape_heavy,
        "mixed_scalars": _generate_mixed_scalars,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _generate_numbers() -> list[Any]:
    """Generates ints and floats, half of them with integral values."""
    values: list[Any] = []
    for _ in range(_SAMPLE_SIZE):
        if random.random() < 0.5:
            values.append(float(random.randint(-10_000, 10_000)))
        else:
            values.append(round(random.uniform(-1000.0, 1000.0), 3))
    return values


def _generate_plain_strings() -> list[Any]:
    """Generates text that needs no escaping."""
    return [_random_string(random.randint(5, 60)) for _ in range(_SAMPLE_SIZE)]


def _generate_escape_heavy() -> list[Any]:
    """Generates text with quotes, backslashes, controls and ``</``."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    random.choice(
                        ['"', "\\", "</", "\b", "\f", "\n", "\r", "\t", "\x01"]
                    )
                )
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    return [create_escaped_string() for _ in range(_SAMPLE_SIZE)]


def _generate_mixed_scalars() -> list[Any]:
    """Generates a mix of ints, floats, text, booleans and nulls."""
    values: list[Any] = []

    for _ in range(_SAMPLE_SIZE):
        choice = random.randint(1, 5)
        if choice == _INT_TYPE:
            values.append(random.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            values.append(round(random.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            values.append(_random_string(random.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            values.append(random.choice([True, False]))
        elif choice == _NULL_TYPE:
            values.append(None)

    return values


def _random_string(length: int) -> str:
    """Generates random string of specified length."""
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))
