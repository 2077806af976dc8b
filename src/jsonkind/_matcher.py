"""Pattern matchers recognizing JavaScript function literals in text."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import Final

# Any character except a line terminator (\n, \r, NEL, LS, PS).
_ANY: Final = "[^\n\r\u0085\u2028\u2029]"

FUNCTION_PATTERN: Final = rf"^function[ ]?\({_ANY}*\)[ ]?\{{{_ANY}*\}}$"
FUNCTION_HEADER_PATTERN: Final = rf"^function[ ]?\({_ANY}*\)$"
FUNCTION_PARAMS_PATTERN: Final = rf"^function[ ]?\(({_ANY}*?)\)$"
FUNCTION_PARTS_PATTERN: Final = (
    rf"^function[ ]?\(({_ANY}*?)\)[ ]?\{{({_ANY}*)\}}$"
)


class RegexpMatcher:
    """Whole-string matcher over a compiled regular expression.

    Wraps the regex engine behind two questions: does the text match, and
    what did a group capture. Swapping the grammar means swapping the
    pattern handed to this class, nothing else.
    """

    def __init__(self, pattern: str, flags: int = 0) -> None:
        """Compile the pattern once.

        Args:
            pattern: Regular expression, anchored or not; matching is always
                against the whole string.
            flags: ``re`` flags, none by default.
        """
        self.pattern: Final = pattern
        self._compiled: Final = re.compile(pattern, flags)

    def matches(self, text: str) -> bool:
        """Returns True if the whole text matches the pattern."""
        return self._compiled.fullmatch(text) is not None

    def get_group_if_matches(self, text: str, group: int) -> str | None:
        """Returns the captured group when the text matches, else None.

        Args:
            text: Candidate text
            group: Index of the capture group to return

        Returns:
            The group's text, or None when the text does not match
        """
        match = self._compiled.fullmatch(text)
        if match is None:
            return None
        return match.group(group)

    def __repr__(self) -> str:
        return f"RegexpMatcher({self.pattern!r})"


@dataclass(frozen=True)
class FunctionMatchers:
    """
    Matchers used to recognize function literals.

    ``literal`` accepts a whole function, ``header`` only the
    ``function(...)`` part, ``params`` captures a header's parameter list
    and ``parts`` captures both the parameter list and the body of a whole
    function.
    """

    literal: RegexpMatcher
    header: RegexpMatcher
    params: RegexpMatcher
    parts: RegexpMatcher


@functools.cache
def function_matchers() -> FunctionMatchers:
    """Returns the process-wide matcher set, compiling it on first use."""
    return FunctionMatchers(
        literal=RegexpMatcher(FUNCTION_PATTERN),
        header=RegexpMatcher(FUNCTION_HEADER_PATTERN),
        params=RegexpMatcher(FUNCTION_PARAMS_PATTERN),
        parts=RegexpMatcher(FUNCTION_PARTS_PATTERN),
    )
