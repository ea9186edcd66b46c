from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .constants import DEFAULT_PATH_SEPARATOR


def split_lookup_path(path: str | Sequence[Any], separator: str = DEFAULT_PATH_SEPARATOR) -> tuple[Any, ...]:
    """Turn a path string or key sequence into its ordered segments.

    Strings are split on ``separator`` verbatim, so empty segments are kept and
    resolve like any other key. Pre-split sequences are taken as-is.
    """
    if isinstance(path, str):
        if not separator:
            raise ValueError("path separator must not be empty")
        return tuple(path.split(separator))
    return tuple(path)


def format_lookup_path(segments: Sequence[Any], separator: str = DEFAULT_PATH_SEPARATOR) -> str:
    return separator.join(str(segment) for segment in segments)


__all__ = [
    "format_lookup_path",
    "split_lookup_path",
]
