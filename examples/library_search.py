"""Library use: resolve arguments, then scan with a custom printer."""

import sys

from rich.console import Console

from mm_grep import Configuration, LinePrinter, ScanError, fatal, parse_args, run


def main() -> None:
    """Search like the CLI, but always write highlighted output to stderr."""
    result = parse_args(sys.argv[1:] or ["-n", "-r", "-c", "def ", "src"])
    if result.is_err():
        fatal(str(result.error))
    config = result.unwrap()
    if not isinstance(config, Configuration):
        fatal("help is only available through the mm-grep command")

    printer = LinePrinter(colored=config.colored, console=Console(stderr=True, highlight=False, soft_wrap=True))
    try:
        run(config, printer)
    except ScanError as e:
        fatal(f"Error: {e}")


if __name__ == "__main__":
    main()
