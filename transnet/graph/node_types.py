"""Node and edge type definitions for the response graph."""

from enum import Enum


class NodeType(str, Enum):
    """Types of nodes in the response graph."""

    INPUT = "input"
    ENTITY = "entity"
    FIELD = "field"


class EdgeType(str, Enum):
    """Types of edges in the response graph."""

    LINK = "link"  # Input -> Entity
    HAS_FIELD = "has_field"  # Entity -> Field
