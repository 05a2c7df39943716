"""Entities returned to the host tool."""

import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ..errors import InvalidArgumentError, InvalidStateError
from .field import Field, element_to_string
from .matching import MatchingRule

# Synthetic field names the host tool renders on the incoming edge
LINK_PREFIX = "link#"
LINK_LABEL = "link#maltego.link.label"
LINK_SHOW_LABEL = "link#maltego.link.show-label"


@dataclass
class Entity:
    """A typed, weighted node in the host tool's graph."""

    entity_type: str
    value: str
    weight: int = 0
    fields: list[Field] = field(default_factory=list, init=False)
    _has_edge_label: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.entity_type is None:
            raise InvalidArgumentError("Entity type cannot be None.", "entity_type")
        if self.value is None:
            raise InvalidArgumentError("Entity value cannot be None.", "value")

    @property
    def has_edge_label(self) -> bool:
        """Check if an edge label has been attached."""
        return self._has_edge_label

    def add_field(
        self,
        name: str,
        display_name: str | None = None,
        value: str | None = None,
        matching_rule: MatchingRule = MatchingRule.LOOSE,
    ) -> "Entity":
        """Append an additional field and return the entity for chaining."""
        self.fields.append(Field(name, display_name, value, matching_rule))
        return self

    def add_edge_label(
        self,
        label: str,
        properties: Iterable[tuple[str, str]] | Mapping[str, str] | None = None,
    ) -> None:
        """Attach a label and optional properties to the edge leading here.

        Args:
            label: Text shown on the edge.
            properties: (name, value) pairs shown as edge properties. A
                mapping is taken in insertion order.

        Raises:
            InvalidStateError: If the entity already has an edge label.
        """
        if self._has_edge_label:
            raise InvalidStateError("Only one edge label per edge is allowed.")

        if isinstance(properties, Mapping):
            properties = properties.items()

        self.fields.append(Field(LINK_LABEL, value=label))
        self.fields.append(Field(LINK_SHOW_LABEL, value="1"))
        for index, (name, value) in enumerate(properties or ()):
            self.fields.append(Field(f"{LINK_PREFIX}{index}", display_name=name, value=value))

        self._has_edge_label = True

    def to_element(self) -> ET.Element:
        """Build the ``<Entity>`` element, fields included."""
        element = ET.Element("Entity", {"Type": self.entity_type})
        ET.SubElement(element, "Value").text = self.value
        ET.SubElement(element, "Weight").text = str(self.weight)

        additional = ET.SubElement(element, "AdditionalFields")
        for f in self.fields:
            additional.append(f.to_element())

        return element

    def to_xml(self) -> str:
        """Encode the entity as an ``<Entity>`` XML string."""
        return element_to_string(self.to_element())
