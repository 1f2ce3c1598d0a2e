# catpath/parsing/parser.py
from __future__ import annotations

import argparse
import re
from typing import List, NoReturn, Optional, Sequence

from catpath.constants import DEFAULT_SEP, PROG_NAME
from catpath.core.exceptions import UsageError
from catpath.core.models import ParsedCommand, PathArgs

_MISSING_VALUE = re.compile(r"argument (-\w)(?:/[-\w]+)?: expected one argument")
_BUNDLED_UNKNOWN = re.compile(r"argument -\w(?:/[-\w]+)?: ignored explicit argument '(.)")

# "-s" or a flag bundle ending in "s" ("-dfs"): the next token is its value.
_SEP_OPTION = re.compile(r"^-[dfhvx]*s$")


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting the process."""

    def error(self, message: str) -> NoReturn:
        m = _MISSING_VALUE.match(message)
        if m:
            raise UsageError(f"Required argument missing on {m.group(1)} option")
        m = _BUNDLED_UNKNOWN.match(message)
        if m:
            raise UsageError(f"Invalid option -{m.group(1)} on command line")
        raise UsageError(message)


def _build_parser(prog: str = PROG_NAME) -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Positional path lists are not declared; they are collected from the
          unparsed remainder so that options may be interleaved with them.
        - ``-h`` is a plain flag: help is rendered by the caller, not argparse.
    """
    p = _RaisingArgumentParser(
        prog=prog,
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTION...] PATH...",
        add_help=False,
        allow_abbrev=False,
        description=(
            "Concatenate directory paths into a list.  Each PATH is a list\n"
            "of one or more directory paths, separated by a designated\n"
            "separator character (see -s option)."
        ),
        epilog=(
            "Duplicate paths are dropped (first occurrence wins) and absolute\n"
            "paths that do not name an existing directory are left out."
        ),
    )

    g_list = p.add_argument_group("Path list")
    g_misc = p.add_argument_group("Miscellaneous")

    g_list.add_argument(
        "-d",
        "--allow-dups",
        action="store_true",
        dest="allow_dups",
        help="allow duplicate paths",
    )
    g_list.add_argument(
        "-f",
        "--force",
        action="store_true",
        dest="force",
        help="include a path even if the directory doesn't exist",
    )
    g_list.add_argument(
        "-s",
        "--separator",
        metavar="CHAR",
        action="append",
        dest="separator",
        help=f"specify a character used to separate paths\n(defaults to '{DEFAULT_SEP}')",
    )
    g_list.add_argument(
        "-x",
        "--expand",
        action="store_true",
        dest="expand",
        help="replace a leading tilde ('~/') with the user's home directory",
    )

    g_misc.add_argument(
        "-h",
        "--help",
        action="store_true",
        dest="help",
        help="display this help text",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="report skipped paths on standard error",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="emit diagnostics as JSON lines (also CATPATH_JSON_LOGS=1)",
    )
    return p


def _resolve_separator(values: Optional[List[str]]) -> str:
    """Validate every -s occurrence in command-line order."""
    sep: Optional[str] = None
    for val in values or []:
        if val == "":
            raise UsageError("Specified separator is an empty string")
        if len(val) > 1:
            raise UsageError("Specified separator consists of multiple characters")
        if sep is not None and val != sep:
            raise UsageError("Conflicting specifications for separator character")
        sep = val
    return sep if sep is not None else DEFAULT_SEP


def _split_double_dash(argv: Sequence[str]) -> tuple[List[str], List[str]]:
    """Split *argv* at the first ``--`` that is not a separator value.

    A dash-led token right after ``-s`` is that option's value, as with
    getopt; it is glued to the option so argparse does not read it as a
    flag (``-s -x`` becomes ``-s-x``, ``--separator --`` becomes
    ``--separator=--``).
    """
    head: List[str] = []
    tokens = list(argv)
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok == "--":
            return head, tokens[i + 1:]
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None
        if nxt is not None and nxt.startswith("-"):
            if _SEP_OPTION.match(tok):
                head.append(tok + nxt)
                i += 2
                continue
            if tok == "--separator":
                head.append(f"{tok}={nxt}")
                i += 2
                continue
        head.append(tok)
        i += 1
    return head, []


def parse_command(argv: Sequence[str], *, prog: str = PROG_NAME) -> ParsedCommand:
    """Turn an argv tail into a `ParsedCommand`.

    Pure function: no global parser state, no filesystem or environment
    access. Raises `UsageError` on any malformed or conflicting option.
    """
    head, tail = _split_double_dash(argv)
    ns, rest = _build_parser(prog).parse_known_args(head)

    if ns.help:
        return ParsedCommand(args=PathArgs(help=True), verbose=ns.verbose, json_logs=ns.json_logs)

    separator = _resolve_separator(ns.separator)

    paths: List[str] = []
    for tok in rest:
        if tok.startswith("-") and tok != "-":
            raise UsageError(f"Invalid option {tok} on command line")
        paths.append(tok)
    paths.extend(tail)

    args = PathArgs(
        separator=separator,
        allow_dups=ns.allow_dups,
        force=ns.force,
        expand=ns.expand,
    )
    return ParsedCommand(args=args, paths=tuple(paths), verbose=ns.verbose, json_logs=ns.json_logs)
