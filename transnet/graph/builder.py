"""Builder for converting a Transformation to a ResponseGraph."""

import re

from ..model import LINK_LABEL, LINK_SHOW_LABEL
from ..transform import Transformation
from .response_graph import ResponseGraph

LINK_PROPERTY_PATTERN = re.compile(r"^link#([0-9]+)$")


def build_graph(transformation: Transformation) -> ResponseGraph:
    """Build a ResponseGraph from a Transformation.

    Args:
        transformation: The transformation, parsed or built in code.

    Returns:
        A ResponseGraph representing the response.
    """
    graph = ResponseGraph(transformation.entity_value)

    for index, entity in enumerate(transformation.entities):
        graph.add_entity(index, entity.entity_type, entity.value, weight=entity.weight)

        label = None
        show_label = False
        properties: list[tuple[int, str | None, str | None]] = []

        for field in entity.fields:
            if field.name == LINK_LABEL:
                label = field.value
            elif field.name == LINK_SHOW_LABEL:
                show_label = field.value == "1"
            elif match := LINK_PROPERTY_PATTERN.match(field.name):
                properties.append((int(match.group(1)), field.display_name, field.value))
            else:
                # Other link# fields (colour, thickness) stay visible as plain fields
                graph.add_field(
                    index,
                    field.name,
                    display_name=field.display_name,
                    value=field.value,
                    matching_rule=field.matching_rule,
                )

        if label is not None or properties:
            graph.set_link(
                index,
                label,
                show_label=show_label,
                properties=[(name, value) for _, name, value in sorted(properties, key=lambda p: p[0])],
            )

    return graph
