"""transnet: read and write Maltego transform messages."""

from .errors import (
    FormatError,
    InvalidArgumentError,
    InvalidStateError,
    OutOfRangeError,
    StructureError,
    TransNetError,
)
from .model import Entity, Field, MatchingRule
from .transform import Transformation, run_transform

__all__ = [
    "Entity",
    "Field",
    "MatchingRule",
    "Transformation",
    "run_transform",
    "TransNetError",
    "InvalidArgumentError",
    "InvalidStateError",
    "OutOfRangeError",
    "FormatError",
    "StructureError",
]
