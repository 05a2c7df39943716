"""Tests for running a transform function."""

import io

import pytest

from transnet.errors import OutOfRangeError
from transnet.model import MatchingRule
from transnet.transform import Transformation, run_transform


def resolve(transform):
    entity = transform.add_entity("maltego.IPv4Address", "93.184.216.34", 100)
    entity.add_field("source", value=transform.input_arguments.get("source"))


class TestRunTransform:
    def test_prints_response(self):
        out = io.StringIO()
        transformation = run_transform(resolve, ["example.com", "source=dns"], file=out)

        assert out.getvalue() == transformation.to_xml() + "\n"
        assert '<Field Name="source" MatchingRule="loose">dns</Field>' in out.getvalue()

    def test_returns_filled_transformation(self):
        transformation = run_transform(resolve, ["example.com"], file=io.StringIO())

        assert transformation.entity_value == "example.com"
        assert len(transformation.entities) == 1

    def test_reads_sys_argv(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["resolve.py", "example.com", "source=argv"])
        out = io.StringIO()

        transformation = run_transform(resolve, file=out)

        assert transformation.input_arguments["source"] == "argv"

    def test_output_decodes(self):
        def with_strict_field(transform):
            transform.add_entity("t", "v").add_field("n", "N", "x", MatchingRule.STRICT)

        out = io.StringIO()
        run_transform(with_strict_field, ["v"], file=out)

        decoded = Transformation.from_xml(out.getvalue())
        assert decoded.entities[0].fields[0].matching_rule is MatchingRule.STRICT

    def test_argument_errors_propagate(self):
        called = []
        with pytest.raises(OutOfRangeError):
            run_transform(called.append, [], file=io.StringIO())
        assert called == []

    def test_escape_sequences_are_written_unchanged(self):
        out = io.StringIO()
        transformation = run_transform(
            lambda t: t.add_entity("t", "red\x1b[31mtext"), ["v"], file=out
        )

        assert out.getvalue() == transformation.to_xml() + "\n"
        assert "<Value>red\x1b[31mtext</Value>" in out.getvalue()
