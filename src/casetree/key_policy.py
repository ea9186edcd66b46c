from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from .types import Key

_INDEX_RE = re.compile(r"(?:0|-?[1-9]\d*)")


def fold_key(key: Key) -> str:
    if isinstance(key, str):
        return key.lower()
    return str(key)


def as_index(key: object) -> int | None:
    """Return the integer a canonical decimal string key stands for, if any."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and _INDEX_RE.fullmatch(key):
        return int(key)
    return None


def next_index(keys: Iterable[Key]) -> int:
    indexes = [key for key in keys if isinstance(key, int) and not isinstance(key, bool)]
    if not indexes:
        return 0
    return max(max(indexes) + 1, 0)


def is_dense_sequence(keys: Iterable[Key]) -> bool:
    return all(key == position and not isinstance(key, bool) for position, key in enumerate(keys))


def is_sequence_seed(data: object) -> bool:
    return isinstance(data, (list, tuple))


def is_mapping_seed(data: object) -> bool:
    return isinstance(data, Mapping)


def seed_items(data: Any) -> Iterable[tuple[Any, Any]]:
    if is_mapping_seed(data):
        return data.items()
    return enumerate(data)


__all__ = [
    "as_index",
    "fold_key",
    "is_dense_sequence",
    "is_mapping_seed",
    "is_sequence_seed",
    "next_index",
    "seed_items",
]
