from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .path_lookup import format_lookup_path


class ContainerError(RuntimeError):
    """Base container error."""


class MissingKeyError(ContainerError, KeyError, AttributeError):
    """Raised when a key is read that the queried node does not define.

    It is a ``KeyError`` for indexed access and an ``AttributeError`` so that
    ``hasattr`` and ``getattr(..., default)`` work on attribute access.
    """

    def __init__(self, key: Any, *, path: Sequence[Any] | None = None) -> None:
        self.key = key
        self.path = tuple(path) if path is not None else None
        if self.path is None:
            message = f"identifier {key!r} is not defined"
        else:
            message = f"identifier {key!r} is not defined (path {format_lookup_path(self.path)!r})"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])
