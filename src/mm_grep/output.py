"""Output layer: plain lines and match highlighting."""

# ruff: noqa: T201 -- output layer

import sys
from typing import TextIO

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

MATCH_STYLE = Style(color="red")


def print_plain(*messages: object, file: TextIO | None = None) -> None:
    """Print messages with the builtin print, no Rich processing."""
    print(*messages, file=file)


class LinePrinter:
    """Writes result lines, highlighting matches when the destination is a terminal.

    Whether color is used is decided once, at construction: piped or
    redirected output never receives escape codes, even with ``colored=True``.
    Line content is written untouched; only the matched slices are wrapped in
    escape codes.
    """

    def __init__(self, *, colored: bool, console: Console | None = None) -> None:
        """Initialize the printer.

        Args:
            colored: Whether highlighting was requested.
            console: Console to write to. Defaults to one on stdout whose
                terminal check is ``sys.stdout.isatty()``, ignoring Rich's
                color environment overrides.

        """
        if console is None:
            console = Console(force_terminal=sys.stdout.isatty(), no_color=False, highlight=False)
        self.console = console
        self.color_enabled = colored and console.is_terminal

    def print_line(self, line: str, *, prefix: str | None = None) -> None:
        """Print a line as-is, after ``prefix: `` when a prefix is given."""
        print_plain(line if prefix is None else f"{prefix}: {line}", file=self.console.file)

    def print_highlighted(self, line: str, spans: list[tuple[int, int]], *, prefix: str | None = None) -> None:
        """Print a line with each ``(start, end)`` span styled as a match."""
        color_system = COLOR_SYSTEMS.get(self.console.color_system or "")
        parts: list[str] = []
        pos = 0
        for start, end in spans:
            parts.append(line[pos:start])
            parts.append(MATCH_STYLE.render(line[start:end], color_system=color_system))
            pos = end
        parts.append(line[pos:])
        self.print_line("".join(parts), prefix=prefix)
