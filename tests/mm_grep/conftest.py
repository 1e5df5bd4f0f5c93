"""Shared fixtures: a small documentation tree to search."""

from pathlib import Path

import pytest

GREP_MD = (
    "## Search Utility\n"
    "In this programming assignment, you are expected to implement a command-line utility that\n"
    "searches for a specific pattern in one or multiple files, similar in spirit to the UNIX\n"
    "`grep` command.\n"
)


@pytest.fixture()
def docs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create ``docs/grep.md`` and ``docs/recursive/grep.md`` and chdir to their parent.

    Returns the relative ``docs`` directory.
    """
    root = tmp_path / "docs"
    (root / "recursive").mkdir(parents=True)
    (root / "grep.md").write_text(GREP_MD)
    (root / "recursive" / "grep.md").write_text(GREP_MD)
    monkeypatch.chdir(tmp_path)
    return Path("docs")
