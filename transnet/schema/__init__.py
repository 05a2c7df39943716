"""Schema layer for YAML response fixtures."""

from .errors import FixtureLoadError, FixtureValidationError
from .models import EdgeLabelSpec, EdgeProperty, EntitySpec, FieldSpec, ResponseFixture
from .loader import build_transformation, load_yaml, parse_fixture, parse_fixture_from_string

__all__ = [
    "FixtureLoadError",
    "FixtureValidationError",
    "EdgeLabelSpec",
    "EdgeProperty",
    "EntitySpec",
    "FieldSpec",
    "ResponseFixture",
    "build_transformation",
    "load_yaml",
    "parse_fixture",
    "parse_fixture_from_string",
]
