"""YAML loading and parsing for response fixtures."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..transform import Transformation
from .errors import FixtureLoadError, FixtureValidationError
from .models import ResponseFixture

logger = logging.getLogger(__name__)


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file and return the raw data.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data as a dictionary.

    Raises:
        FixtureLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise FixtureLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise FixtureLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FixtureLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise FixtureLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise FixtureLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def parse_fixture(path: str | Path) -> ResponseFixture:
    """Load and parse a YAML file into a ResponseFixture.

    Raises:
        FixtureLoadError: If the file cannot be read or parsed.
        FixtureValidationError: If the data fails validation.
    """
    data = load_yaml(path)
    return _parse_fixture_data(data)


def parse_fixture_from_string(yaml_string: str) -> ResponseFixture:
    """Parse a YAML string into a ResponseFixture.

    Raises:
        FixtureLoadError: If the YAML cannot be parsed.
        FixtureValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise FixtureLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise FixtureLoadError(f"Expected YAML mapping at root, got {type(data).__name__}")

    return _parse_fixture_data(data)


def build_transformation(fixture: ResponseFixture) -> Transformation:
    """Turn a fixture into a transformation ready to be encoded.

    Raises:
        OutOfRangeError: If the fixture input has the wrong number of arguments.
        FormatError: If the fixture input has a malformed field-pack.
    """
    transformation = Transformation(fixture.input)

    for spec in fixture.entities:
        entity = transformation.add_entity(spec.type, spec.value, spec.weight)
        for field in spec.fields:
            entity.add_field(field.name, field.display_name, field.value, field.matching_rule)
        if spec.edge_label is not None:
            entity.add_edge_label(
                spec.edge_label.label,
                [(p.name, p.value) for p in spec.edge_label.properties],
            )

    logger.debug("Built transformation with %d entities from fixture", len(transformation.entities))
    return transformation


def _parse_fixture_data(data: dict) -> ResponseFixture:
    try:
        return ResponseFixture.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise FixtureValidationError(
            f"Fixture validation failed with {len(errors)} error(s)", errors
        ) from e
