from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from .key_policy import as_index, fold_key, next_index
from .types import Key, PayloadKind

if TYPE_CHECKING:
    from .container import RecursiveContainer


@dataclass(frozen=True)
class ScalarPayload:
    value: Any = None


@dataclass
class MappingPayload:
    """Ordered child nodes plus the folded-key index used for case-insensitive lookup."""

    entries: dict[Key, RecursiveContainer] = field(default_factory=dict)
    key_index: dict[str, Key] = field(default_factory=dict)
    kind: PayloadKind = "mapping"

    def store(self, key: Key | None, node: RecursiveContainer) -> Key:
        if key is None:
            if not self.entries:
                self.kind = "sequence"
            key = next_index(self.entries)
        elif key not in self.entries:
            index = as_index(key)
            if index is not None and index in self.entries:
                key = index
        self.entries[key] = node
        self.key_index[fold_key(key)] = key
        return key

    def find(self, key: Key, *, case_sensitive: bool) -> Key | None:
        if case_sensitive:
            if key in self.entries:
                return key
            index = as_index(key)
            if index is not None and index in self.entries:
                return index
            return None
        return self.key_index.get(fold_key(key))

    def discard(self, key: Key) -> None:
        if key not in self.entries:
            return
        del self.entries[key]

        folded = fold_key(key)
        if self.key_index.get(folded) != key:
            return
        # another key may still fold to the same alias; point at the latest one
        survivors = [existing for existing in self.entries if fold_key(existing) == folded]
        if survivors:
            self.key_index[folded] = survivors[-1]
        else:
            del self.key_index[folded]


Payload: TypeAlias = ScalarPayload | MappingPayload

__all__ = [
    "MappingPayload",
    "Payload",
    "ScalarPayload",
]
