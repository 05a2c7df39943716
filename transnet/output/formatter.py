"""Output formatting for transform responses."""

import json
from typing import Literal

from ..graph import build_graph
from ..transform import Transformation


def format_transformation(
    transformation: Transformation,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a transformation for output.

    Args:
        transformation: The transformation to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(transformation)
    return _format_text(transformation)


def _format_text(transformation: Transformation) -> str:
    """Format the response as human-readable text."""
    graph = build_graph(transformation)
    lines: list[str] = []

    lines.append(f"INPUT: {graph.input_value if graph.input_value is not None else '(unknown)'}")
    lines.append("")

    lines.append("ENTITIES:")
    nodes = graph.get_entity_nodes()
    if not nodes:
        lines.append("  (none)")

    for node in nodes:
        link = graph.get_link(node["index"])
        label = f" <-[{link['label']}]-" if link and link["label"] is not None else ""
        lines.append(
            f"  {node['entity_type']}: {node['value']} (weight {node['weight']}){label}"
        )
        for field in graph.get_fields_for_entity(node["index"]):
            display = f" ({field['display_name']})" if field["display_name"] else ""
            lines.append(
                f"    - {field['name']}{display} = {field['value'] or ''}"
                f" [{field['matching_rule'].value}]"
            )
        for name, value in (link["properties"] if link else []):
            lines.append(f"    ~ {name} = {value or ''}")

    # Summary
    lines.append("")
    counts = graph.get_entity_type_counts()
    if counts:
        summary = ", ".join(f"{count} {entity_type}" for entity_type, count in counts.items())
        lines.append(f"{len(nodes)} entities: {summary}")
    else:
        lines.append("0 entities")

    return "\n".join(lines)


def _format_json(transformation: Transformation) -> str:
    """Format the response as JSON."""
    data = {
        "input_arguments": transformation.input_arguments,
        "entity_count": len(transformation.entities),
        "entities": [
            {
                "type": entity.entity_type,
                "value": entity.value,
                "weight": entity.weight,
                "fields": [
                    {
                        "name": field.name,
                        "display_name": field.display_name,
                        "value": field.value,
                        "matching_rule": field.matching_rule.value,
                    }
                    for field in entity.fields
                ],
            }
            for entity in transformation.entities
        ],
    }
    return json.dumps(data, indent=2)
