"""catpath – merge directory path lists (PATH, LD_LIBRARY_PATH, ...).

Quick start::

    >>> from catpath import PathArgs, build_path
    >>> build_path(["a", "a", "b"], PathArgs())
    'a:b'
"""
from __future__ import annotations

from catpath.constants import DEFAULT_SEP
from catpath.cli import CatPath, main
from catpath.core.builder import PathListBuilder, build_path
from catpath.core.exceptions import CatPathError, UsageError
from catpath.core.models import ParsedCommand, PathArgs
from catpath.fs.checker import DirectoryChecker, is_dir
from catpath.parsing.parser import parse_command
from catpath.parsing.tokenize import split_path_list, tokenize_arguments
from catpath.rendering.output import render_help

__version__ = '1.0.0'

__all__ = [
    'CatPath',
    'main',
    'DEFAULT_SEP',
    'PathArgs',
    'ParsedCommand',
    'PathListBuilder',
    'build_path',
    'CatPathError',
    'UsageError',
    'DirectoryChecker',
    'is_dir',
    'parse_command',
    'split_path_list',
    'tokenize_arguments',
    'render_help',
]
