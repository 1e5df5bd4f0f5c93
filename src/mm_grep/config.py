"""Command-line argument resolution into a run configuration.

Arguments are classified in a single left-to-right pass. Flags may appear
before or after the positional arguments; ``--`` turns every later token into
a positional one. The first positional token is the search pattern, the rest
are input paths.
"""

import re
from collections.abc import Sequence
from typing import TypeAlias

from mm_result import Result
from pydantic import BaseModel, ConfigDict, Field

from .matcher import LiteralMatcher

MISSING_ARGUMENTS = "Missing arguments. Use -h for help."
MISSING_PATTERN = "Missing search pattern."
MISSING_INPUTS = "Missing input files."

HELP_FLAGS = frozenset({"-h", "--help"})
END_OF_OPTIONS = "--"

# flag -> option name
FLAGS = {
    "-i": "ignore_case",
    "-n": "show_line_numbers",
    "-v": "invert_match",
    "-r": "recursive",
    "-f": "show_filenames",
    "-c": "colored",
}


class Configuration(BaseModel):
    """Validated, read-only settings for one search run."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    inputs: tuple[str, ...] = Field(min_length=1)
    matcher: LiteralMatcher
    show_line_numbers: bool = False
    invert_match: bool = False
    recursive: bool = False
    show_filenames: bool = False
    colored: bool = False


class HelpRequested(BaseModel):
    """Outcome of a ``-h`` / ``--help`` invocation: show usage, do nothing else."""

    model_config = ConfigDict(frozen=True)


ParseOutcome: TypeAlias = HelpRequested | Configuration


def parse_args(args: Sequence[str]) -> Result[ParseOutcome]:
    """Resolve raw arguments (program name excluded) into a parse outcome.

    Errors carry the user-facing message in ``result.error``. The help flag
    wins as soon as it is seen, so nothing after it is validated.
    """
    if not args:
        return Result.err(MISSING_ARGUMENTS)

    options = dict.fromkeys(FLAGS.values(), False)
    pattern: str | None = None
    inputs: list[str] = []
    options_closed = False

    for arg in args:
        if not options_closed:
            if arg in HELP_FLAGS:
                return Result.ok(HelpRequested())
            if arg in FLAGS:
                options[FLAGS[arg]] = True
                continue
            if arg == END_OF_OPTIONS:
                options_closed = True
                continue

        if pattern is None:
            pattern = arg
        else:
            inputs.append(arg)

    if pattern is None:
        return Result.err(MISSING_PATTERN)
    if not inputs:
        return Result.err(MISSING_INPUTS)

    ignore_case = options.pop("ignore_case")
    try:
        matcher = LiteralMatcher(pattern, ignore_case=ignore_case)
    except re.error as e:
        return Result.err(str(e))

    return Result.ok(Configuration(inputs=tuple(inputs), matcher=matcher, **options))
