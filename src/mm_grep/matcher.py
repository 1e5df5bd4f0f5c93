"""Literal pattern matching."""

import re


class LiteralMatcher:
    """Matches a pattern as a literal substring, never as a regular expression.

    The pattern is escaped before compiling, so ``.`` or ``*`` only match
    themselves. Case sensitivity is fixed at construction.
    """

    def __init__(self, pattern: str, *, ignore_case: bool = False) -> None:
        """Compile the escaped pattern.

        Raises:
            re.error: If the escaped pattern can't be compiled.

        """
        self.pattern = pattern
        self.ignore_case = ignore_case
        self._regex = re.compile(re.escape(pattern), re.IGNORECASE if ignore_case else 0)

    def is_match(self, line: str) -> bool:
        """Check whether the pattern occurs anywhere in the line."""
        return self._regex.search(line) is not None

    def spans(self, line: str) -> list[tuple[int, int]]:
        """Return ``(start, end)`` of every non-overlapping occurrence, left to right."""
        return [m.span() for m in self._regex.finditer(line)]

    def __repr__(self) -> str:
        """Show the pattern and case mode."""
        return f"LiteralMatcher({self.pattern!r}, ignore_case={self.ignore_case})"
