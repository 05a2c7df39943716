"""The Transformation: input arguments in, response document out."""

import xml.etree.ElementTree as ET
from collections.abc import Sequence
from typing import IO

from ..model import Entity
from ..model.field import element_to_string
from .arguments import ENTITY_VALUE_KEY, parse_arguments
from .decoder import decode_entities
from .signals import emit_debug, emit_progress


class Transformation:
    """One invocation of a transform program.

    Holds the input arguments decoded from the command line and the
    entities to return to the host tool. Built either from positional
    arguments or, with :meth:`from_xml`, from a previously produced
    response document.
    """

    def __init__(self, args: Sequence[str]):
        """Create a transformation from command line arguments.

        Args:
            args: Positional arguments given by the host tool, without the
                program name.

        Raises:
            OutOfRangeError: If there are not between one and three arguments.
            FormatError: If the field-pack is malformed.
        """
        self.input_arguments, self.optional_parameter = parse_arguments(args)
        self.entities: list[Entity] = []

    @classmethod
    def from_xml(cls, xml: str) -> "Transformation":
        """Create a transformation from a response document.

        The input arguments of the returned transformation are empty.

        Raises:
            StructureError: If the document is malformed or incomplete.
            FormatError: If a weight or matching rule cannot be parsed.
        """
        transformation = cls.__new__(cls)
        transformation.input_arguments = {}
        transformation.optional_parameter = None
        transformation.entities = decode_entities(xml)
        return transformation

    @property
    def entity_value(self) -> str | None:
        """The value of the input entity, if known."""
        return self.input_arguments.get(ENTITY_VALUE_KEY)

    def add_entity(self, entity_type: str, value: str, weight: int = 0) -> Entity:
        """Create an entity, add it to the response and return it."""
        entity = Entity(entity_type, value, weight)
        self.entities.append(entity)
        return entity

    def to_element(self) -> ET.Element:
        """Build the ``<MaltegoMessage>`` element wrapping all entities."""
        message = ET.Element("MaltegoMessage")
        response = ET.SubElement(message, "MaltegoTransformResponseMessage")
        container = ET.SubElement(response, "_entities")
        for entity in self.entities:
            container.append(entity.to_element())
        return message

    def to_xml(self) -> str:
        """Encode the whole response as XML readable by the host tool."""
        return element_to_string(self.to_element())

    def emit_debug(self, message: str, file: IO[str] | None = None) -> None:
        """Show a debug message in the host tool."""
        emit_debug(message, file)

    def emit_progress(self, percent: int, file: IO[str] | None = None) -> None:
        """Set the host tool's progress bar.

        Raises:
            OutOfRangeError: If the percentage is not within 0-100.
        """
        emit_progress(percent, file)
