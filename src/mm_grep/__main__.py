"""Entry point for ``python -m mm_grep``."""

from .cli import main

main()
