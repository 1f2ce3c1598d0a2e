from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DirectoryCheckerProtocol(Protocol):
    def is_dir(self, path: str) -> bool:
        ...
