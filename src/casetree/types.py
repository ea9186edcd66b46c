from __future__ import annotations

from typing import Literal, TypeAlias

CaseTransform = Literal["lower", "upper"]
Key: TypeAlias = str | int
PayloadKind = Literal["mapping", "sequence"]

__all__ = [
    "CaseTransform",
    "Key",
    "PayloadKind",
]
