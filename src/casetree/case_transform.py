from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .constants import CASE_LOWER_TOKENS, CASE_NONE_TOKENS, CASE_UPPER_TOKENS
from .types import CaseTransform

logger = logging.getLogger(__name__)


def parse_case_transform(raw: object | None, *, default: CaseTransform | None = None) -> CaseTransform | None:
    if raw is None:
        return None

    mode = str(raw).strip().lower()
    if mode in CASE_LOWER_TOKENS:
        return "lower"
    if mode in CASE_UPPER_TOKENS:
        return "upper"
    if mode in CASE_NONE_TOKENS:
        return None

    logger.warning("invalid case transform %r; falling back to %r", raw, default)
    return default


def apply_case(text: str, mode: CaseTransform | None) -> str:
    if mode == "lower":
        return text.lower()
    if mode == "upper":
        return text.upper()
    return text


def transform_values(data: Any, mode: CaseTransform | None) -> Any:
    """Rebuild ``data`` with every string value re-cased; keys are left alone."""
    if mode is None:
        return data
    if isinstance(data, str):
        return apply_case(data, mode)
    if isinstance(data, Mapping):
        return {key: transform_values(value, mode) for key, value in data.items()}
    if isinstance(data, list):
        return [transform_values(item, mode) for item in data]
    return data


def transform_keys(data: Any, mode: CaseTransform | None) -> Any:
    """Rebuild ``data`` with every string mapping key re-cased.

    When two keys collapse onto the same cased form the later one wins.
    """
    if mode is None:
        return data
    if isinstance(data, Mapping):
        result: dict[Any, Any] = {}
        for key, value in data.items():
            cased_key = apply_case(key, mode) if isinstance(key, str) else key
            result[cased_key] = transform_keys(value, mode)
        return result
    if isinstance(data, list):
        return [transform_keys(item, mode) for item in data]
    return data


def transform_view(
    data: Any,
    *,
    value_mode: CaseTransform | None,
    key_mode: CaseTransform | None,
) -> Any:
    return transform_keys(transform_values(data, value_mode), key_mode)


__all__ = [
    "apply_case",
    "parse_case_transform",
    "transform_keys",
    "transform_values",
    "transform_view",
]
