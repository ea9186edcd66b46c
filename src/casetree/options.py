from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, field_validator

from .case_transform import parse_case_transform
from .constants import (
    DEFAULT_CASE_SENSITIVE,
    DEFAULT_IGNORE_MISSING,
    DEFAULT_KEY_CASE_TRANSFORM,
    DEFAULT_VALUE_CASE_TRANSFORM,
    ENV_CASE_SENSITIVE,
    ENV_IGNORE_MISSING,
    ENV_KEY_CASE,
    ENV_PREFIX,
    ENV_VALUE_CASE,
    FALSE_TEXT_VALUES,
    TRUE_TEXT_VALUES,
)
from .types import CaseTransform

if TYPE_CHECKING:
    from .container import RecursiveContainer

logger = logging.getLogger(__name__)


def parse_bool(raw: object | None, *, default: bool) -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return bool(raw)

    value = str(raw).strip().lower()
    if value in TRUE_TEXT_VALUES:
        return True
    if value in FALSE_TEXT_VALUES:
        return False

    logger.warning("invalid boolean flag %r; falling back to %r", raw, default)
    return default


class ContainerOptions(BaseModel):
    """Snapshot of the four per-node flags, applied recursively to a tree."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    case_sensitive: bool = DEFAULT_CASE_SENSITIVE
    ignore_missing: bool = DEFAULT_IGNORE_MISSING
    value_case_transform: CaseTransform | None = DEFAULT_VALUE_CASE_TRANSFORM
    key_case_transform: CaseTransform | None = DEFAULT_KEY_CASE_TRANSFORM

    @field_validator("case_sensitive", mode="before")
    @classmethod
    def _validate_case_sensitive(cls, value: object | None) -> bool:
        return parse_bool(value, default=DEFAULT_CASE_SENSITIVE)

    @field_validator("ignore_missing", mode="before")
    @classmethod
    def _validate_ignore_missing(cls, value: object | None) -> bool:
        return parse_bool(value, default=DEFAULT_IGNORE_MISSING)

    @field_validator("value_case_transform", "key_case_transform", mode="before")
    @classmethod
    def _validate_case_transform(cls, value: object | None) -> CaseTransform | None:
        return parse_case_transform(value)

    def apply(self, container: RecursiveContainer) -> RecursiveContainer:
        return (
            container.set_case_sensitivity(self.case_sensitive)
            .set_ignore_missing(self.ignore_missing)
            .set_value_case_transform(self.value_case_transform)
            .set_key_case_transform(self.key_case_transform)
        )


def _read_env_value(environ: Mapping[str, str], key: str) -> str | None:
    value = environ.get(key)
    if value is not None and value.strip():
        return value.strip()
    wanted = key.upper()
    for env_key, env_value in environ.items():
        if env_key.upper() != wanted:
            continue
        stripped = env_value.strip()
        if stripped:
            return stripped
    return None


def load_options_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    prefix: str = ENV_PREFIX,
) -> ContainerOptions:
    source = os.environ if environ is None else environ
    raw: dict[str, Any] = {}
    for field_name, env_name in (
        ("case_sensitive", ENV_CASE_SENSITIVE),
        ("ignore_missing", ENV_IGNORE_MISSING),
        ("value_case_transform", ENV_VALUE_CASE),
        ("key_case_transform", ENV_KEY_CASE),
    ):
        value = _read_env_value(source, f"{prefix}{env_name}")
        if value is not None:
            raw[field_name] = value
    return ContainerOptions.model_validate(raw)


__all__ = [
    "ContainerOptions",
    "load_options_from_env",
    "parse_bool",
]
