"""Pydantic models for YAML response fixtures."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..model import MatchingRule


class FieldSpec(BaseModel):
    """An additional field of a fixture entity."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    display_name: str | None = None
    value: str | None = None
    matching_rule: MatchingRule = MatchingRule.LOOSE

    @field_validator("matching_rule", mode="before")
    @classmethod
    def normalize_matching_rule(cls, value):
        """Accept matching rules in any case."""
        if isinstance(value, str):
            return value.lower()
        return value


class EdgeProperty(BaseModel):
    """A property shown on the edge leading to an entity."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    value: str


class EdgeLabelSpec(BaseModel):
    """The label on the edge leading to an entity."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    label: str
    properties: list[EdgeProperty] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_edge_label(cls, data):
        """Normalize a plain string label and mapping-style properties."""
        if isinstance(data, str):
            return {"label": data}
        if not isinstance(data, dict):
            return data

        properties = data.get("properties")
        if isinstance(properties, dict):
            data["properties"] = [
                {"name": name, "value": value} for name, value in properties.items()
            ]

        return data


class EntitySpec(BaseModel):
    """An entity in a response fixture."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: str
    value: str
    weight: int = 0
    fields: list[FieldSpec] = Field(default_factory=list)
    edge_label: EdgeLabelSpec | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_entity(cls, data):
        """Normalize shorthand field syntax.

        ``fields: {name: value}`` becomes a list of loose fields, and bare
        strings in a field list become fields without a value.
        """
        if not isinstance(data, dict):
            return data

        fields = data.get("fields")
        if isinstance(fields, dict):
            data["fields"] = [{"name": name, "value": value} for name, value in fields.items()]
        elif isinstance(fields, list):
            data["fields"] = [
                {"name": f} if isinstance(f, str) else f for f in fields
            ]

        return data


class ResponseFixture(BaseModel):
    """Root model for a response fixture file."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    input: list[str] = Field(default_factory=lambda: ["fixture"])
    entities: list[EntitySpec] = Field(default_factory=list)

    @field_validator("input", mode="before")
    @classmethod
    def normalize_input(cls, value):
        """Allow a single string as the input entity value."""
        if isinstance(value, str):
            return [value]
        return value

    def get_entities_of_type(self, entity_type: str) -> list[EntitySpec]:
        """Get all fixture entities of a type."""
        return [e for e in self.entities if e.type == entity_type]
