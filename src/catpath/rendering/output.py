"""
output – Text produced on standard output.

Help text is generated from the same argparse definition that parses the
command line, so every option and the default separator are listed.
"""
from __future__ import annotations

from catpath.constants import PROG_NAME
from catpath.parsing.parser import _build_parser


def render_help(prog: str = PROG_NAME) -> str:
    """Return the usage message for *prog*."""
    return _build_parser(prog).format_help()


def render_path_list(path: str) -> str:
    """Return *path* as the single output line."""
    return f"{path}\n"
