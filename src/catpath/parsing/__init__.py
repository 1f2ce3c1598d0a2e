"""
catpath.parsing – Command-line and path-list parsing.
"""
from .parser import parse_command
from .tokenize import split_path_list, tokenize_arguments

__all__ = ["parse_command", "split_path_list", "tokenize_arguments"]
