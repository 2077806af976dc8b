"""Exceptions raised while rendering values as JSON text."""

from typing import Any


class JSONError(ValueError):
    """
    Base class for rendering failures.

    Keeps the offending value so callers can report what could not be
    rendered without re-deriving it from the message.
    """

    def __init__(self, msg: str, value: Any = None) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")

        self.msg = msg
        self.value = value
        super().__init__(msg)


class InvalidNumberError(JSONError):
    """Raised for NaN, infinite or missing numbers on the strict path."""


class MalformedCustomRenderingError(JSONError):
    """Raised when ``to_json_string()`` fails or returns non-text."""
