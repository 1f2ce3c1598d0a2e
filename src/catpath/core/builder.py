"""
builder – Reassemble tokenized directory paths into one path list.

Each token goes through a fixed pipeline:

    expand '~/'  →  drop missing absolute dirs  →  drop duplicates  →  emit

The order matters: a token dropped by the existence check is never marked
as seen, so a nonexistent early copy cannot shadow a later one that does
exist (e.g. after tilde expansion).
"""
from __future__ import annotations

import os
from typing import Iterable, List, Mapping, Optional, Set

from catpath.constants import HOME_ENV
from catpath.core.interfaces.fs import DirectoryCheckerProtocol
from catpath.core.interfaces.logging import LoggerLikeProtocol
from catpath.core.models import PathArgs
from catpath.fs.checker import DirectoryChecker
from catpath.logging.helpers import get_logger

_TILDE_PREFIX = "~/"


class _HomeLookup:
    """Read HOME at most once; scoped to a single build."""

    _UNSET = object()

    def __init__(self, environ: Mapping[str, str]) -> None:
        self._environ = environ
        self._value: object = self._UNSET

    def get(self) -> str:
        if self._value is self._UNSET:
            self._value = self._environ.get(HOME_ENV) or ""
        return self._value  # type: ignore[return-value]


class PathListBuilder:
    """Filter, deduplicate and join a token sequence according to `PathArgs`.

    Parameters
    ----------
    args:
        Parsed configuration (separator and the -d/-f/-x switches).
    checker:
        Directory predicate; defaults to a filesystem `DirectoryChecker`.
    environ:
        Mapping consulted for HOME; defaults to ``os.environ``.
    logger:
        Receives DEBUG records for every dropped token.
    """

    def __init__(
        self,
        args: PathArgs,
        *,
        checker: Optional[DirectoryCheckerProtocol] = None,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._args = args
        self._checker = checker or DirectoryChecker()
        self._environ = environ if environ is not None else os.environ
        self._log = logger or get_logger("builder")

    @staticmethod
    def _expand_tilde(token: str, home: _HomeLookup) -> str:
        # Only "~/..." qualifies; a bare "~" or "~user" is left alone.
        if token[:2] != _TILDE_PREFIX:
            return token
        home_dir = home.get()
        if not home_dir:
            return token
        return home_dir + token[1:]

    def accepted(self, tokens: Iterable[str]) -> List[str]:
        """Return the tokens that survive expansion, filtering and dedup."""
        args = self._args
        home = _HomeLookup(self._environ)
        seen: Set[str] = set()
        out: List[str] = []

        for raw in tokens:
            token = self._expand_tilde(raw, home) if args.expand else raw

            if not args.force and token.startswith("/") and not self._checker.is_dir(token):
                self._log.debug("skipping %s: not an accessible directory", token)
                continue

            if not args.allow_dups:
                if token in seen:
                    self._log.debug("skipping %s: duplicate", token)
                    continue
                seen.add(token)

            out.append(token)
        return out

    def build(self, tokens: Iterable[str]) -> str:
        """Return the joined output path list (possibly empty)."""
        return self._args.separator.join(self.accepted(tokens))


def build_path(
    tokens: Iterable[str],
    args: PathArgs,
    *,
    checker: Optional[DirectoryCheckerProtocol] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Functional shortcut for ``PathListBuilder(args, ...).build(tokens)``."""
    return PathListBuilder(args, checker=checker, environ=environ).build(tokens)
