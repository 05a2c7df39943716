"""Parsing of the positional arguments a transform is launched with."""

import logging
from collections.abc import Sequence

from ..errors import FormatError, OutOfRangeError

logger = logging.getLogger(__name__)

ENTITY_VALUE_KEY = "EntityValue"
FIELD_SEPARATOR = "#"
KEY_VALUE_SEPARATOR = "="


def parse_arguments(args: Sequence[str]) -> tuple[dict[str, str], str | None]:
    """Split the command line arguments into input arguments.

    The host tool passes the entity value and, optionally, a field-pack of
    the form ``field1=value1#field2=value2``. A three argument invocation
    carries an extra leading parameter which is returned separately.

    Args:
        args: The positional arguments, without the program name.

    Returns:
        Tuple of (input arguments, optional parameter).

    Raises:
        OutOfRangeError: If there are not between one and three arguments.
        FormatError: If a field-pack segment is not a single key=value pair.
    """
    if not 1 <= len(args) <= 3:
        raise OutOfRangeError(
            f"Wrong number of arguments ({len(args)}). Only 1-3 arguments are allowed.",
            len(args),
        )

    optional_parameter = args[0] if len(args) == 3 else None
    entity_value = args[0] if len(args) == 1 else args[-2]

    arguments = {ENTITY_VALUE_KEY: entity_value}
    if len(args) >= 2:
        arguments.update(parse_field_pack(args[-1]))

    logger.debug("Parsed %d input argument(s) from %d positional", len(arguments), len(args))
    return arguments, optional_parameter


def parse_field_pack(pack: str) -> dict[str, str]:
    """Parse a ``name=value#name=value`` field-pack into a dictionary.

    Raises:
        FormatError: If a segment does not split into exactly two parts.
    """
    fields: dict[str, str] = {}
    for segment in pack.split(FIELD_SEPARATOR):
        parts = segment.split(KEY_VALUE_SEPARATOR)
        if len(parts) != 2:
            raise FormatError(
                f"Field argument {segment!r} cannot be split at '{KEY_VALUE_SEPARATOR}'.",
                segment,
            )
        fields[parts[0]] = parts[1]
    return fields
