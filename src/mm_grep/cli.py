"""Command-line entry point.

``mm-grep [OPTIONS] <pattern> <files...>``
"""

import typer
from typer.core import TyperCommand

from .config import HelpRequested, parse_args
from .output import print_plain
from .scan import ScanError, run
from .utils import fatal

USAGE = """\
Usage: grep [OPTIONS] <pattern> <files...>

Options:
-i                Case-insensitive search
-n                Print line numbers
-v                Invert match (exclude lines that match the pattern)
-r                Recursive directory search
-f                Print filenames
-c                Enable colored output
-h, --help        Show help information"""

# ctx.meta key holding the untouched argument list
RAW_ARGS_KEY = "mm_grep.raw_args"


class RawArgsCommand(TyperCommand):
    """TyperCommand that hands the argument list to the callback untouched.

    Click's parser consumes ``--`` and rejects unknown short options, and the
    grep grammar needs both verbatim, so click parsing is skipped here and the
    callback resolves the arguments with :func:`parse_args`.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        """Store the arguments in ``ctx.meta`` without interpreting them."""
        ctx.meta[RAW_ARGS_KEY] = list(args)
        ctx.args = []
        return ctx.args


app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


@app.command(cls=RawArgsCommand)
def grep(ctx: typer.Context) -> None:
    """Print lines of files that contain a literal pattern."""
    result = parse_args(ctx.meta[RAW_ARGS_KEY])
    if result.is_err():
        fatal(str(result.error))

    outcome = result.unwrap()
    if isinstance(outcome, HelpRequested):
        print_plain(USAGE)
        return

    try:
        run(outcome)
    except ScanError as e:
        fatal(f"Error: {e}")


def main() -> None:
    """Run the CLI."""
    app()
