"""Definition serialization tests."""

from __future__ import annotations

import json

import pytest
from structured_output_schema.schema_model import (
    DataType,
    Definition,
    DefinitionEncoder,
    definition_to_dict,
    definition_to_json,
)


@pytest.mark.parametrize(
    ("definition", "expected"),
    [
        (Definition(), {"properties": {}}),
        (
            Definition(
                type=DataType.STRING,
                description="A string type",
                properties={"name": Definition(type=DataType.STRING)},
            ),
            {
                "type": "string",
                "description": "A string type",
                "properties": {"name": {"type": "string", "properties": {}}},
            },
        ),
        (
            Definition(
                type=DataType.OBJECT,
                properties={
                    "user": Definition(
                        type=DataType.OBJECT,
                        properties={
                            "name": Definition(type=DataType.STRING),
                            "age": Definition(type=DataType.INTEGER),
                            "address": Definition(
                                type=DataType.OBJECT,
                                properties={
                                    "city": Definition(type=DataType.STRING),
                                    "country": Definition(type=DataType.STRING),
                                },
                            ),
                        },
                    )
                },
            ),
            {
                "type": "object",
                "properties": {
                    "user": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string", "properties": {}},
                            "age": {"type": "integer", "properties": {}},
                            "address": {
                                "type": "object",
                                "properties": {
                                    "city": {"type": "string", "properties": {}},
                                    "country": {"type": "string", "properties": {}},
                                },
                            },
                        },
                    }
                },
            },
        ),
        (
            Definition(
                type=DataType.ARRAY,
                items=Definition(type=DataType.STRING),
                properties={"name": Definition(type=DataType.STRING)},
            ),
            {
                "type": "array",
                "items": {"type": "string", "properties": {}},
                "properties": {"name": {"type": "string", "properties": {}}},
            },
        ),
        (
            Definition(
                type=DataType.OBJECT,
                properties={"name": Definition(type=DataType.STRING)},
                required=["name"],
                additional_properties=False,
            ),
            {
                "type": "object",
                "properties": {"name": {"type": "string", "properties": {}}},
                "required": ["name"],
                "additionalProperties": False,
            },
        ),
        (
            Definition(
                type=DataType.OBJECT,
                properties={"data": Definition(type=DataType.STRING)},
                additional_properties=True,
            ),
            {
                "type": "object",
                "properties": {"data": {"type": "string", "properties": {}}},
                "additionalProperties": True,
            },
        ),
        (
            Definition(
                type=DataType.OBJECT,
                properties={"value": Definition(type=DataType.NUMBER)},
            ),
            {
                "type": "object",
                "properties": {"value": {"type": "number", "properties": {}}},
            },
        ),
    ],
    ids=[
        "empty",
        "properties-on-string",
        "nested-objects",
        "array",
        "additional-properties-false",
        "additional-properties-true",
        "additional-properties-unset",
    ],
)
def test_definition_renders_expected_document(
    definition: Definition, expected: dict[str, object]
) -> None:
    assert json.loads(definition_to_json(definition)) == expected
    assert json.loads(json.dumps(definition, cls=DefinitionEncoder)) == expected


def test_rendered_keys_follow_canonical_order() -> None:
    definition = Definition(
        type=DataType.OBJECT,
        description="Status record",
        enum=["a"],
        properties={"state": Definition(type=DataType.STRING)},
        required=["state"],
        items=Definition(type=DataType.STRING),
        additional_properties=False,
    )

    assert list(definition_to_dict(definition)) == [
        "type",
        "description",
        "enum",
        "properties",
        "required",
        "items",
        "additionalProperties",
    ]


def test_empty_properties_survive_json_round_trip_at_every_depth() -> None:
    definition = Definition(
        type=DataType.OBJECT,
        properties={
            "tags": Definition(type=DataType.ARRAY, items=Definition(type=DataType.STRING)),
            "meta": Definition(
                type=DataType.OBJECT,
                properties={"inner": Definition(type=DataType.OBJECT)},
            ),
        },
    )

    parsed = json.loads(definition_to_json(definition))

    assert parsed["properties"]["tags"]["items"]["properties"] == {}
    assert parsed["properties"]["meta"]["properties"]["inner"]["properties"] == {}
    assert json.loads(definition_to_json(Definition()))["properties"] == {}


def test_embedded_definition_serializes_like_direct_call() -> None:
    definition = Definition(type=DataType.STRING, enum=["pending", "active"])
    payload = {"response_format": {"schema": definition}, "others": [definition]}

    rendered = json.loads(json.dumps(payload, cls=DefinitionEncoder))

    assert rendered["response_format"]["schema"] == definition_to_dict(definition)
    assert rendered["others"][0] == definition_to_dict(definition)


def test_serialization_does_not_mutate_definition() -> None:
    definition = Definition(type=DataType.OBJECT)

    definition_to_json(definition)

    assert definition.properties is None
    assert definition == Definition(type=DataType.OBJECT)


def test_json_text_keeps_non_ascii_descriptions() -> None:
    definition = Definition(type=DataType.STRING, description="Größe in cm")

    text = definition_to_json(definition)

    assert "Größe" in text
    assert definition_to_json(definition, indent=2).startswith("{\n  ")


def test_encoder_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError):
        json.dumps({"value": object()}, cls=DefinitionEncoder)
