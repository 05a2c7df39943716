"""Transform invocation: argument parsing, response encoding and decoding."""

from .arguments import ENTITY_VALUE_KEY, parse_arguments, parse_field_pack
from .decoder import decode_entities
from .runner import run_transform
from .signals import emit_debug, emit_progress
from .transformation import Transformation

__all__ = [
    "Transformation",
    "run_transform",
    "parse_arguments",
    "parse_field_pack",
    "decode_entities",
    "emit_debug",
    "emit_progress",
    "ENTITY_VALUE_KEY",
]
