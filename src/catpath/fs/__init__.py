"""
catpath.fs – Filesystem probes.
"""
from .checker import DirectoryChecker, is_dir

__all__ = ["DirectoryChecker", "is_dir"]
