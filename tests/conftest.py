"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from transnet.model import Entity, MatchingRule
from transnet.schema.loader import build_transformation, parse_fixture_from_string
from transnet.transform import Transformation


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def example_xml() -> str:
    """Return a response with one entity and one strict field."""
    return (
        "<MaltegoMessage><MaltegoTransformResponseMessage><_entities>"
        '<Entity Type="EntityType"><Value>Value</Value><Weight>1</Weight>'
        "<AdditionalFields>"
        '<Field Name="AdditionalField" DisplayName="DisplayName" MatchingRule="strict">Value</Field>'
        "</AdditionalFields></Entity>"
        "</_entities></MaltegoTransformResponseMessage></MaltegoMessage>"
    )


@pytest.fixture
def example_entity() -> Entity:
    """Return the entity encoded in example_xml."""
    entity = Entity("EntityType", "Value", 1)
    entity.add_field("AdditionalField", "DisplayName", "Value", MatchingRule.STRICT)
    return entity


@pytest.fixture
def transformation() -> Transformation:
    """Return a transformation built from an entity value and a field-pack."""
    return Transformation(["EntityValue", "field1=value1#field2=value2"])


@pytest.fixture
def labelled_fixture_yaml() -> str:
    """Return a fixture with edge labels and shorthand fields."""
    return """
input: ["example.com", "fqdn=example.com"]
entities:
  - type: maltego.IPv4Address
    value: 93.184.216.34
    weight: 100
    fields:
      - name: internal
        display_name: Internal
        value: "false"
        matching_rule: STRICT
    edge_label:
      label: resolves to
      properties:
        record: A
        ttl: 3600
  - type: maltego.DNSName
    value: www.example.com
    fields:
      source: passive-dns
  - type: maltego.DNSName
    value: mail.example.com
    edge_label: subdomain
"""


@pytest.fixture
def labelled_transformation(labelled_fixture_yaml) -> Transformation:
    """Return a transformation built from the labelled fixture."""
    return build_transformation(parse_fixture_from_string(labelled_fixture_yaml))
