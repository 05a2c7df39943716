"""Tests for fixture models."""

import pytest
from pydantic import ValidationError

from transnet.model import MatchingRule
from transnet.schema.models import EdgeLabelSpec, EntitySpec, FieldSpec, ResponseFixture


class TestFieldSpec:
    def test_basic_field(self):
        field = FieldSpec(name="source")
        assert field.name == "source"
        assert field.display_name is None
        assert field.value is None
        assert field.matching_rule is MatchingRule.LOOSE

    def test_matching_rule_any_case(self):
        field = FieldSpec.model_validate({"name": "n", "matching_rule": "Strict"})
        assert field.matching_rule is MatchingRule.STRICT

    def test_unknown_matching_rule(self):
        with pytest.raises(ValidationError):
            FieldSpec.model_validate({"name": "n", "matching_rule": "exact"})

    def test_numeric_value_becomes_string(self):
        field = FieldSpec.model_validate({"name": "port", "value": 443})
        assert field.value == "443"


class TestEdgeLabelSpec:
    def test_plain_string(self):
        spec = EdgeLabelSpec.model_validate("resolves to")
        assert spec.label == "resolves to"
        assert spec.properties == []

    def test_mapping_properties(self):
        spec = EdgeLabelSpec.model_validate(
            {"label": "l", "properties": {"record": "A", "ttl": 60}}
        )
        assert [(p.name, p.value) for p in spec.properties] == [("record", "A"), ("ttl", "60")]

    def test_list_properties(self):
        spec = EdgeLabelSpec.model_validate(
            {"label": "l", "properties": [{"name": "record", "value": "A"}]}
        )
        assert spec.properties[0].name == "record"


class TestEntitySpec:
    def test_defaults(self):
        spec = EntitySpec.model_validate({"type": "maltego.Phrase", "value": "hi"})
        assert spec.weight == 0
        assert spec.fields == []
        assert spec.edge_label is None

    def test_shorthand_field_mapping(self):
        spec = EntitySpec.model_validate(
            {"type": "t", "value": "v", "fields": {"source": "dns", "port": 53}}
        )
        assert [(f.name, f.value) for f in spec.fields] == [("source", "dns"), ("port", "53")]

    def test_bare_field_names(self):
        spec = EntitySpec.model_validate({"type": "t", "value": "v", "fields": ["flag"]})
        assert spec.fields[0].name == "flag"
        assert spec.fields[0].value is None

    def test_value_is_required(self):
        with pytest.raises(ValidationError):
            EntitySpec.model_validate({"type": "t"})


class TestResponseFixture:
    def test_default_input(self):
        fixture = ResponseFixture.model_validate({})
        assert fixture.input == ["fixture"]
        assert fixture.entities == []

    def test_single_string_input(self):
        fixture = ResponseFixture.model_validate({"input": "example.com"})
        assert fixture.input == ["example.com"]

    def test_get_entities_of_type(self):
        fixture = ResponseFixture.model_validate(
            {
                "entities": [
                    {"type": "a", "value": "1"},
                    {"type": "b", "value": "2"},
                    {"type": "a", "value": "3"},
                ]
            }
        )
        assert [e.value for e in fixture.get_entities_of_type("a")] == ["1", "3"]
