"""Entity and field data model."""

from .entity import LINK_LABEL, LINK_PREFIX, LINK_SHOW_LABEL, Entity
from .field import Field
from .matching import MatchingRule

__all__ = [
    "Entity",
    "Field",
    "MatchingRule",
    "LINK_LABEL",
    "LINK_PREFIX",
    "LINK_SHOW_LABEL",
]
