from __future__ import annotations

from .types import CaseTransform

# node defaults
DEFAULT_CASE_SENSITIVE = True
DEFAULT_IGNORE_MISSING = False
DEFAULT_VALUE_CASE_TRANSFORM: CaseTransform | None = None
DEFAULT_KEY_CASE_TRANSFORM: CaseTransform | None = None

# path lookup
DEFAULT_PATH_SEPARATOR = "/"

# env naming
ENV_PREFIX = "CASETREE__"
ENV_CASE_SENSITIVE = "CASE_SENSITIVE"
ENV_IGNORE_MISSING = "IGNORE_MISSING"
ENV_VALUE_CASE = "VALUE_CASE"
ENV_KEY_CASE = "KEY_CASE"

# scalar tokens
TRUE_TEXT_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_TEXT_VALUES = frozenset({"0", "false", "no", "off"})

# case-transform normalization
CASE_LOWER_TOKENS = frozenset({"lower", "lowercase", "case_lower"})
CASE_UPPER_TOKENS = frozenset({"upper", "uppercase", "case_upper"})
CASE_NONE_TOKENS = frozenset({"", "none", "null", "original", "off"})

__all__ = [
    "CASE_LOWER_TOKENS",
    "CASE_NONE_TOKENS",
    "CASE_UPPER_TOKENS",
    "DEFAULT_CASE_SENSITIVE",
    "DEFAULT_IGNORE_MISSING",
    "DEFAULT_KEY_CASE_TRANSFORM",
    "DEFAULT_PATH_SEPARATOR",
    "DEFAULT_VALUE_CASE_TRANSFORM",
    "ENV_CASE_SENSITIVE",
    "ENV_IGNORE_MISSING",
    "ENV_KEY_CASE",
    "ENV_PREFIX",
    "ENV_VALUE_CASE",
    "FALSE_TEXT_VALUES",
    "TRUE_TEXT_VALUES",
]
