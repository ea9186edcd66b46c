from . import exceptions
from .container import RecursiveContainer
from .exceptions import ContainerError, MissingKeyError
from .options import ContainerOptions, load_options_from_env
from .types import CaseTransform

__all__ = [
    "CaseTransform",
    "ContainerError",
    "ContainerOptions",
    "MissingKeyError",
    "RecursiveContainer",
    "exceptions",
    "load_options_from_env",
]
