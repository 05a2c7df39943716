"""ResponseGraph wrapper around networkx for transform responses."""

from collections import Counter
from typing import Any, Iterator

import networkx as nx

from .node_types import EdgeType, NodeType

INPUT_NODE = "input"


class ResponseGraph:
    """A graph representation of a transform response.

    Wraps a networkx DiGraph with one input node, one node per returned
    entity and one node per plain additional field. Edge labels become
    attributes of the link edge from the input to the entity.
    """

    def __init__(self, input_value: str | None = None):
        """Initialize a graph holding only the input node."""
        self._graph = nx.DiGraph()
        self._graph.add_node(INPUT_NODE, node_type=NodeType.INPUT, value=input_value)

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Node management
    # -------------------------------------------------------------------------

    def add_entity(self, index: int, entity_type: str, value: str, **attrs: Any) -> str:
        """Add an entity node linked from the input node.

        Args:
            index: Position of the entity in the response.
            entity_type: The entity type.
            value: The entity value.
            **attrs: Additional attributes for the node (weight).

        Returns:
            The node ID.
        """
        node_id = f"entity:{index}"
        self._graph.add_node(
            node_id,
            node_type=NodeType.ENTITY,
            index=index,
            entity_type=entity_type,
            value=value,
            **attrs,
        )
        self._graph.add_edge(
            INPUT_NODE,
            node_id,
            edge_type=EdgeType.LINK,
            label=None,
            show_label=False,
            properties=[],
        )
        return node_id

    def add_field(self, index: int, name: str, **attrs: Any) -> str:
        """Add a field node to an entity.

        Args:
            index: Position of the owning entity.
            name: The field name.
            **attrs: Additional attributes (display_name, value, matching_rule).

        Returns:
            The node ID.
        """
        entity_id = f"entity:{index}"
        position = self._graph.out_degree(entity_id) if self._graph.has_node(entity_id) else 0

        # Field names may repeat within an entity
        node_id = f"field:{index}.{position}"
        self._graph.add_node(node_id, node_type=NodeType.FIELD, entity=index, name=name, **attrs)

        if self._graph.has_node(entity_id):
            self._graph.add_edge(entity_id, node_id, edge_type=EdgeType.HAS_FIELD)

        return node_id

    def set_link(
        self,
        index: int,
        label: str | None,
        show_label: bool = True,
        properties: list[tuple[str | None, str | None]] | None = None,
    ) -> None:
        """Set the label and properties of the edge leading to an entity."""
        edge = self._graph.edges[INPUT_NODE, f"entity:{index}"]
        edge["label"] = label
        edge["show_label"] = show_label
        edge["properties"] = properties or []

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def input_value(self) -> str | None:
        """Get the value of the input entity."""
        return self._graph.nodes[INPUT_NODE]["value"]

    def get_entity_nodes(self) -> list[dict[str, Any]]:
        """Get all entity nodes in response order."""
        nodes = [
            dict(data)
            for _, data in self._graph.nodes(data=True)
            if data.get("node_type") == NodeType.ENTITY
        ]
        return sorted(nodes, key=lambda n: n["index"])

    def get_entities_of_type(self, entity_type: str) -> list[dict[str, Any]]:
        """Get all entity nodes of a type."""
        return [n for n in self.get_entity_nodes() if n["entity_type"] == entity_type]

    def get_entity_type_counts(self) -> dict[str, int]:
        """Count the entities per type."""
        return dict(Counter(n["entity_type"] for n in self.get_entity_nodes()))

    def get_fields_for_entity(self, index: int) -> list[dict[str, Any]]:
        """Get the plain (non-link) fields of an entity."""
        entity_id = f"entity:{index}"
        if not self._graph.has_node(entity_id):
            return []
        return [
            dict(self._graph.nodes[target])
            for _, target, data in self._graph.out_edges(entity_id, data=True)
            if data.get("edge_type") == EdgeType.HAS_FIELD
        ]

    def get_link(self, index: int) -> dict[str, Any] | None:
        """Get the link edge leading to an entity."""
        entity_id = f"entity:{index}"
        if not self._graph.has_edge(INPUT_NODE, entity_id):
            return None
        return dict(self._graph.edges[INPUT_NODE, entity_id])

    def iter_labelled_links(self) -> Iterator[tuple[int, str, list[tuple[str | None, str | None]]]]:
        """Iterate over links that carry a label.

        Yields:
            Tuples of (entity index, label, properties).
        """
        for node in self.get_entity_nodes():
            link = self.get_link(node["index"])
            if link and link.get("label") is not None:
                yield node["index"], link["label"], link["properties"]
