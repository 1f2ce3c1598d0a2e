from dataclasses import dataclass
from typing import Tuple

from catpath.constants import DEFAULT_SEP


@dataclass(frozen=True)
class PathArgs:
    """What the command line asks for; read-only once parsed."""
    separator: str = DEFAULT_SEP
    allow_dups: bool = False
    force: bool = False
    expand: bool = False
    help: bool = False


@dataclass(frozen=True)
class ParsedCommand:
    """Result of option parsing: configuration plus raw path-list arguments."""
    args: PathArgs
    paths: Tuple[str, ...] = ()
    verbose: bool = False
    json_logs: bool = False
