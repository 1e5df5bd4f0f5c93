"""Literal-pattern line search for files and directory trees."""

from .config import Configuration as Configuration
from .config import HelpRequested as HelpRequested
from .config import parse_args as parse_args
from .matcher import LiteralMatcher as LiteralMatcher
from .output import LinePrinter as LinePrinter
from .output import print_plain as print_plain
from .scan import ScanError as ScanError
from .scan import collect_targets as collect_targets
from .scan import run as run
from .utils import fatal as fatal
