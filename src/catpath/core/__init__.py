from __future__ import annotations

"""Public surface for catpath.core.

Stable import location for the data model, the exceptions and the
path-list builder:

    from catpath.core import PathArgs, PathListBuilder, UsageError
"""

from catpath.core.builder import PathListBuilder, build_path
from catpath.core.exceptions import CatPathError, UsageError
from catpath.core.interfaces import DirectoryCheckerProtocol
from catpath.core.models import ParsedCommand, PathArgs

__all__ = [
    "PathArgs",
    "ParsedCommand",
    "PathListBuilder",
    "build_path",
    "CatPathError",
    "UsageError",
    "DirectoryCheckerProtocol",
]
