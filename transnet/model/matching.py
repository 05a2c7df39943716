"""Matching rules for additional fields."""

from enum import Enum

from ..errors import FormatError


class MatchingRule(str, Enum):
    """Whether a field takes part in entity equality in the host tool.

    STRICT fields distinguish two entities of the same type; LOOSE fields
    do not. The value is the token written to the wire.
    """

    STRICT = "strict"
    LOOSE = "loose"

    @classmethod
    def parse(cls, token: str | None) -> "MatchingRule":
        """Parse a matching rule token, ignoring case.

        Raises:
            FormatError: If the token is not a known matching rule.
        """
        if isinstance(token, cls):
            return token
        if token is not None:
            for rule in cls:
                if rule.value == token.strip().lower():
                    return rule
        raise FormatError(f"Unknown matching rule: {token!r}", token)
