# src/catpath/fs/checker.py
"""
checker – Directory existence probe used by the path-list builder.

A path qualifies only when it can be stat()ed with the current process
permissions and the (symlink-resolved) target is a directory. Missing
entries, regular files, dangling links and permission failures on any
parent component all look the same: ``False``.
"""

from __future__ import annotations

import os
import stat
from typing import Optional

from catpath.core.interfaces.logging import LoggerLikeProtocol
from catpath.logging.helpers import get_logger, trace_fs


class DirectoryChecker:
    """Stateless filesystem predicate; never raises."""

    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger("fs")

    def is_dir(self, path: str) -> bool:
        """Return True if *path* names an existing, accessible directory."""
        try:
            st = os.stat(path)
        except (OSError, ValueError) as exc:
            trace_fs(self._log, "stat failed", path=path, error=str(exc))
            return False
        found = stat.S_ISDIR(st.st_mode)
        trace_fs(self._log, "stat ok", path=path, is_dir=found)
        return found


_DEFAULT_CHECKER = DirectoryChecker()


def is_dir(path: str) -> bool:
    """Module-level shortcut around a shared `DirectoryChecker`."""
    return _DEFAULT_CHECKER.is_dir(path)
