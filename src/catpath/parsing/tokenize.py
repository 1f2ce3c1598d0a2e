"""
tokenize – Path-list tokenization for catpath.

A raw command-line argument such as ``"/usr/bin::/bin:"`` holds one or
more directory paths joined by a single separator character. Runs of
separators count as one delimiter, and separators at either end are
ignored, so stray colons that sneak into hand-built lists disappear.

Both functions are pure and never fail: malformed input simply yields
fewer (possibly zero) tokens.
"""
from typing import Iterable, List, Optional


def split_path_list(raw: Optional[str], sep: str) -> List[str]:
    """Return the individual directory paths found in *raw*.

    Examples
    --------
    >>> split_path_list("a::b:::c", ":")
    ['a', 'b', 'c']
    >>> split_path_list(":::", ":")
    []

    Parameters
    ----------
    raw:
        One path-list argument; ``None`` and ``""`` yield no tokens.
    sep:
        Single separator character.

    Returns
    -------
    List[str]
        Non-empty path strings in their original order.
    """
    if not raw:
        return []
    return [part for part in raw.split(sep) if part]


def tokenize_arguments(args: Iterable[Optional[str]], sep: str) -> List[str]:
    """Tokenize every argument in order and concatenate the results."""
    out: List[str] = []
    for raw in args:
        out.extend(split_path_list(raw, sep))
    return out
