"""Graph layer for inspecting transform responses."""

from .builder import build_graph
from .node_types import EdgeType, NodeType
from .response_graph import ResponseGraph

__all__ = ["ResponseGraph", "build_graph", "NodeType", "EdgeType"]
