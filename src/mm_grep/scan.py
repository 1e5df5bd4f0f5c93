"""Target resolution and line scanning."""

import logging
import os
from collections.abc import Iterable, Iterator

from .config import Configuration
from .output import LinePrinter

logger = logging.getLogger(__name__)


class ScanError(Exception):
    """A target file could not be opened, read or decoded."""


def _walk_files(root: str) -> Iterator[str]:
    """Yield files under ``root`` depth-first, in directory-listing order.

    Symlinked directories are not followed; unreadable directories are skipped.
    """
    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as e:
        logger.debug("skipping unreadable directory %s: %s", root, e)
        return

    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(entry.path)
        elif entry.is_file():
            yield entry.path


def collect_targets(inputs: Iterable[str], *, recursive: bool) -> Iterator[str]:
    """Resolve input paths into the files to scan, preserving input order.

    Directories are expanded only when ``recursive`` is set and are skipped
    otherwise. Paths that are neither files nor directories pass through
    unchanged so that reading them reports the real cause.
    """
    for path in inputs:
        if os.path.isdir(path):
            if recursive:
                yield from _walk_files(path)
            else:
                logger.debug("skipping directory %s (not recursive)", path)
        else:
            yield path


def read_lines(path: str) -> Iterator[str]:
    """Yield the lines of a UTF-8 text file without their terminators.

    Each line is decoded on its own, so lines before an undecodable one are
    still yielded.

    Lines are split on ``\\n`` only; a ``\\r`` before it is dropped too. The file
    is closed once the iterator is exhausted or closed.

    Raises:
        ScanError: If the file can't be opened, read or decoded.

    """
    try:
        with open(path, "rb") as f:  # noqa: PTH123
            for raw in f:
                data = raw.removesuffix(b"\n")
                if len(data) < len(raw):
                    data = data.removesuffix(b"\r")
                yield data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError(str(e)) from e


def build_prefix(path: str, line_number: int, *, show_filenames: bool, show_line_numbers: bool) -> str | None:
    """Compose the ``path``, ``line_number`` or ``path:line_number`` prefix, if any."""
    parts: list[str] = []
    if show_filenames:
        parts.append(path)
    if show_line_numbers:
        parts.append(str(line_number))
    return ":".join(parts) if parts else None


def scan_file(path: str, config: Configuration, printer: LinePrinter) -> None:
    """Print the selected lines of one file."""
    logger.debug("scanning %s", path)
    for line_number, line in enumerate(read_lines(path), start=1):
        is_match = config.matcher.is_match(line)
        if is_match == config.invert_match:
            continue

        prefix = build_prefix(
            path, line_number, show_filenames=config.show_filenames, show_line_numbers=config.show_line_numbers
        )
        # inverted output shows non-matching lines, nothing to highlight there
        if printer.color_enabled and is_match and not config.invert_match:
            printer.print_highlighted(line, config.matcher.spans(line), prefix=prefix)
        else:
            printer.print_line(line, prefix=prefix)


def run(config: Configuration, printer: LinePrinter | None = None) -> None:
    """Scan every target in order.

    The first unreadable file aborts the run; lines printed before it stay printed.

    Raises:
        ScanError: If a target can't be opened, read or decoded.

    """
    if printer is None:
        printer = LinePrinter(colored=config.colored)
    for path in collect_targets(config.inputs, recursive=config.recursive):
        scan_file(path, config, printer)
