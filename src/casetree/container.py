from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from copy import deepcopy
from typing import Any

from .case_transform import parse_case_transform, transform_view
from .constants import (
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_IGNORE_MISSING,
    DEFAULT_KEY_CASE_TRANSFORM,
    DEFAULT_PATH_SEPARATOR,
    DEFAULT_VALUE_CASE_TRANSFORM,
)
from .exceptions import MissingKeyError
from .key_policy import is_dense_sequence, is_mapping_seed, is_sequence_seed, seed_items
from .options import ContainerOptions, parse_bool
from .path_lookup import split_lookup_path
from .payload import MappingPayload, Payload, ScalarPayload
from .types import CaseTransform, Key

logger = logging.getLogger(__name__)

_NO_DATA = object()


class RecursiveContainer:
    """A node of a tree that wraps nested mappings and sequences.

    Every value stored in a node is wrapped into a child node, so the tree is
    homogeneous. Reads hand back plain ``dict``/``list``/scalar values with the
    node's case transforms applied; the stored data is never re-cased.

    Example:
        >>> tree = RecursiveContainer({"Server": {"Host": "Example.org"}})
        >>> tree.path("Server/Host")
        'Example.org'
        >>> tree.to_upper().path("Server/Host")
        'EXAMPLE.ORG'
    """

    __slots__ = (
        "_payload",
        "_case_sensitive",
        "_ignore_missing",
        "_value_case_transform",
        "_key_case_transform",
    )

    def __init__(self, data: Any = _NO_DATA, *, options: ContainerOptions | None = None) -> None:
        self._payload: Payload = MappingPayload()
        self._case_sensitive: bool = DEFAULT_CASE_SENSITIVE
        self._ignore_missing: bool = DEFAULT_IGNORE_MISSING
        self._value_case_transform: CaseTransform | None = DEFAULT_VALUE_CASE_TRANSFORM
        self._key_case_transform: CaseTransform | None = DEFAULT_KEY_CASE_TRANSFORM

        if isinstance(data, RecursiveContainer):
            data._copy_into(self)
        elif is_mapping_seed(data) or is_sequence_seed(data):
            for key, value in seed_items(data):
                self.set(key, value)
            if is_sequence_seed(data):
                self._mapping().kind = "sequence"
        elif data is not _NO_DATA:
            self._payload = ScalarPayload(data)

        if options is not None:
            options.apply(self)

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def ignore_missing(self) -> bool:
        return self._ignore_missing

    @property
    def value_case_transform(self) -> CaseTransform | None:
        return self._value_case_transform

    @property
    def key_case_transform(self) -> CaseTransform | None:
        return self._key_case_transform

    @property
    def is_leaf(self) -> bool:
        """True if this node holds a scalar instead of child nodes."""
        return isinstance(self._payload, ScalarPayload)

    def options(self) -> ContainerOptions:
        return ContainerOptions(
            case_sensitive=self._case_sensitive,
            ignore_missing=self._ignore_missing,
            value_case_transform=self._value_case_transform,
            key_case_transform=self._key_case_transform,
        )

    def set(self, key: Key | None, value: Any) -> None:
        """Wrap ``value`` and store it under ``key``; ``None`` appends."""
        self._mapping().store(key, RecursiveContainer(value))

    def append(self, value: Any) -> None:
        self.set(None, value)

    def get(self, key: Key) -> Any:
        """Return the materialized value stored under ``key``.

        Raises:
            MissingKeyError: ``key`` is absent and missing keys are not ignored.
        """
        node = self._lookup(key)
        if node is None:
            return self._missing(key)
        return self._view(node._materialize())

    def child(self, key: Key) -> RecursiveContainer:
        """Return the node stored under ``key`` rather than its value."""
        node = self._lookup(key)
        if node is None:
            return self._missing(key)
        return node

    def exists(self, key: Key) -> bool:
        return self._lookup(key) is not None

    def remove(self, key: Key) -> None:
        payload = self._payload
        if not isinstance(payload, MappingPayload):
            return
        resolved = payload.find(key, case_sensitive=self._case_sensitive)
        if resolved is not None:
            payload.discard(resolved)

    def path(self, path: str | Sequence[Any], separator: str = DEFAULT_PATH_SEPARATOR) -> Any:
        """Resolve a ``separator``-joined path (or a list of keys) from this node.

        Each step follows the missing-key policy of the node it is taken from.
        """
        segments = split_lookup_path(path, separator)
        if not segments:
            return self.value()

        node = self
        for segment in segments[:-1]:
            found = node._lookup(segment)
            if found is None:
                return node._missing(segment, path=segments)
            node = found

        last = segments[-1]
        if not node.exists(last):
            return node._missing(last, path=segments)
        return node.get(last)

    def value(self) -> Any:
        payload = self._payload
        if isinstance(payload, MappingPayload):
            return self.to_array()
        return self._view(payload.value)

    def to_array(self) -> dict[Any, Any] | list[Any]:
        """Materialize the subtree into plain nested ``dict``/``list`` values.

        A leaf comes back wrapped in a one-element list; use ``value()`` for
        the bare scalar.
        """
        payload = self._payload
        if isinstance(payload, ScalarPayload):
            return self._view([payload.value])
        return self._materialize()

    def count(self) -> int:
        payload = self._payload
        if isinstance(payload, MappingPayload):
            return len(payload.entries)
        return 0 if payload.value is None else 1

    def iterate(self) -> Iterator[tuple[Key, RecursiveContainer]]:
        payload = self._payload
        if not isinstance(payload, MappingPayload):
            return iter(())
        return iter(list(payload.entries.items()))

    def set_case_sensitivity(self, case_sensitive: bool = True) -> RecursiveContainer:
        flag = parse_bool(case_sensitive, default=DEFAULT_CASE_SENSITIVE)
        for node in self._walk():
            node._case_sensitive = flag
        return self

    def set_ignore_missing(self, ignore_missing: bool = False) -> RecursiveContainer:
        flag = parse_bool(ignore_missing, default=DEFAULT_IGNORE_MISSING)
        for node in self._walk():
            node._ignore_missing = flag
        return self

    def set_value_case_transform(self, mode: CaseTransform | str | None = None) -> RecursiveContainer:
        parsed = parse_case_transform(mode)
        for node in self._walk():
            node._value_case_transform = parsed
        return self

    def set_key_case_transform(self, mode: CaseTransform | str | None = None) -> RecursiveContainer:
        parsed = parse_case_transform(mode)
        for node in self._walk():
            node._key_case_transform = parsed
        return self

    def configure(self, options: ContainerOptions) -> RecursiveContainer:
        return options.apply(self)

    def to_upper(self) -> RecursiveContainer:
        return self.set_value_case_transform("upper").set_key_case_transform("upper")

    def to_lower(self) -> RecursiveContainer:
        return self.set_value_case_transform("lower").set_key_case_transform("lower")

    def original(self) -> RecursiveContainer:
        return self.set_value_case_transform(None).set_key_case_transform(None)

    def clone(self) -> RecursiveContainer:
        copied = RecursiveContainer()
        self._copy_into(copied)
        return copied

    def __copy__(self) -> RecursiveContainer:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> RecursiveContainer:
        return self.clone()

    def __getitem__(self, key: Key) -> Any:
        return self.get(key)

    def __setitem__(self, key: Key | None, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Key) -> None:
        self.remove(key)

    def __contains__(self, key: object) -> bool:
        try:
            return self.exists(key)  # type: ignore[arg-type]
        except TypeError:
            return False

    def __getattr__(self, name: str) -> Any:
        # only reached when regular attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in RecursiveContainer.__slots__:
            object.__setattr__(self, name, value)
            return
        if hasattr(type(self), name):
            raise AttributeError(f"{name!r} is a container attribute; use container[{name!r}] = ... to store it")
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if name in RecursiveContainer.__slots__:
            object.__delattr__(self, name)
            return
        if hasattr(type(self), name):
            raise AttributeError(f"{name!r} is a container attribute; use del container[{name!r}] to remove it")
        self.remove(name)

    def __iter__(self) -> Iterator[tuple[Key, RecursiveContainer]]:
        return self.iterate()

    def __len__(self) -> int:
        return self.count()

    def __repr__(self) -> str:
        payload = self._payload
        if isinstance(payload, ScalarPayload):
            return f"RecursiveContainer({payload.value!r})"
        return f"RecursiveContainer({payload.kind}, {len(payload.entries)} entries)"

    def _mapping(self) -> MappingPayload:
        payload = self._payload
        if not isinstance(payload, MappingPayload):
            payload = MappingPayload()
            self._payload = payload
        return payload

    def _lookup(self, key: Key) -> RecursiveContainer | None:
        payload = self._payload
        if not isinstance(payload, MappingPayload):
            return None
        resolved = payload.find(key, case_sensitive=self._case_sensitive)
        if resolved is None:
            return None
        return payload.entries[resolved]

    def _missing(self, key: Key, *, path: Sequence[Any] | None = None) -> RecursiveContainer:
        if not self._ignore_missing:
            raise MissingKeyError(key, path=path)
        logger.debug("identifier %r is not defined; returning empty node", key)
        return RecursiveContainer(None)

    def _view(self, data: Any) -> Any:
        return transform_view(
            data,
            value_mode=self._value_case_transform,
            key_mode=self._key_case_transform,
        )

    def _materialize(self) -> Any:
        payload = self._payload
        if isinstance(payload, ScalarPayload):
            return self._view(payload.value)

        children = {key: node._materialize() for key, node in payload.entries.items()}
        if payload.kind == "sequence" and is_dense_sequence(children):
            return self._view(list(children.values()))
        return self._view(children)

    def _walk(self) -> Iterator[RecursiveContainer]:
        yield self
        payload = self._payload
        if isinstance(payload, MappingPayload):
            for node in payload.entries.values():
                yield from node._walk()

    def _copy_into(self, target: RecursiveContainer) -> None:
        payload = self._payload
        if isinstance(payload, ScalarPayload):
            target._payload = ScalarPayload(deepcopy(payload.value))
        else:
            target._payload = MappingPayload(
                entries={key: node.clone() for key, node in payload.entries.items()},
                key_index=dict(payload.key_index),
                kind=payload.kind,
            )
        target._case_sensitive = self._case_sensitive
        target._ignore_missing = self._ignore_missing
        target._value_case_transform = self._value_case_transform
        target._key_case_transform = self._key_case_transform


__all__ = [
    "RecursiveContainer",
]
