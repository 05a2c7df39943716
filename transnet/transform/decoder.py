"""Decoding of response documents back into entities."""

import logging
import re
from xml.etree.ElementTree import Element, ParseError

# Use defusedxml for parsing documents we did not produce ourselves
import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from ..errors import FormatError, StructureError
from ..model import Entity, Field, MatchingRule

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def decode_entities(xml: str) -> list[Entity]:
    """Parse a response document and return its entities in document order.

    Args:
        xml: The response XML text.

    Returns:
        All ``Entity`` elements of the document, root included, as entities.

    Raises:
        StructureError: If the document is malformed or an entity lacks a
            required element.
        FormatError: If a weight or matching rule cannot be parsed.
    """
    try:
        root = ET.fromstring(xml)
    except (ParseError, DefusedXmlException) as e:
        raise StructureError(f"Invalid response XML: {e}") from e

    entities = [decode_entity(element) for element in root.iter("Entity")]
    logger.debug("Decoded %d entities from response", len(entities))
    return entities


def decode_entity(element: Element) -> Entity:
    """Decode a single ``<Entity>`` element."""
    entity_type = element.get("Type")
    if entity_type is None:
        raise StructureError("Entity element has no Type attribute.")

    value = _text(_require_child(element, "Value"))
    weight = _parse_weight(_text(_require_child(element, "Weight")))

    entity = Entity(entity_type, value, weight)
    for field_element in _require_child(element, "AdditionalFields"):
        entity.fields.append(decode_field(field_element))

    return entity


def decode_field(element: Element) -> Field:
    """Decode a single ``<Field>`` element."""
    return Field(
        element.get("Name"),
        element.get("DisplayName"),
        _text(element),
        MatchingRule.parse(element.get("MatchingRule")),
    )


def _require_child(element: Element, tag: str) -> Element:
    child = element.find(tag)
    if child is None:
        raise StructureError(f"Entity element has no {tag} element.")
    return child


def _text(element: Element) -> str:
    return "".join(element.itertext())


def _parse_weight(text: str) -> int:
    if not INTEGER_PATTERN.match(text):
        raise FormatError(f"Weight {text!r} is not an integer.", text)
    return int(text)
