"""Additional fields attached to an entity."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from ..errors import InvalidArgumentError
from .matching import MatchingRule


def element_to_string(element: ET.Element) -> str:
    """Serialize an element without declaration, keeping explicit end tags."""
    return ET.tostring(element, encoding="unicode", short_empty_elements=False)


@dataclass
class Field:
    """A named attribute shown in the entity's property panel.

    Fields are passed on to the next transform as input arguments, so the
    name is mandatory. ``display_name`` is only the UI label.
    """

    name: str
    display_name: str | None = None
    value: str | None = None
    matching_rule: MatchingRule = MatchingRule.LOOSE

    def __post_init__(self) -> None:
        if self.name is None:
            raise InvalidArgumentError("Field name is mandatory and cannot be None.", "name")
        self.matching_rule = MatchingRule.parse(self.matching_rule)

    def to_element(self) -> ET.Element:
        """Build the ``<Field>`` element for this field."""
        attrib = {"Name": self.name}
        if self.display_name is not None:
            attrib["DisplayName"] = self.display_name
        attrib["MatchingRule"] = MatchingRule.parse(self.matching_rule).value

        element = ET.Element("Field", attrib)
        element.text = self.value
        return element

    def to_xml(self) -> str:
        """Encode the field as a ``<Field>`` XML string."""
        return element_to_string(self.to_element())
