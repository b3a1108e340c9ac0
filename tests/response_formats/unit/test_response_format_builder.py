"""Response format envelope tests."""

from __future__ import annotations

import pytest
from structured_output_schema.response_formats import ResponseFormatError, build_response_format
from structured_output_schema.schema_model import DataType, Definition


def test_wraps_definition_in_json_schema_envelope() -> None:
    definition = Definition(
        type=DataType.OBJECT,
        properties={"answer": Definition(type=DataType.STRING)},
        required=["answer"],
        additional_properties=False,
    )

    envelope = build_response_format(
        definition, name="math_response", description="Final answer only"
    )

    assert envelope == {
        "type": "json_schema",
        "json_schema": {
            "name": "math_response",
            "description": "Final answer only",
            "schema": {
                "type": "object",
                "properties": {"answer": {"type": "string", "properties": {}}},
                "required": ["answer"],
                "additionalProperties": False,
            },
            "strict": True,
        },
    }


def test_accepts_rendered_mapping_and_omits_empty_description() -> None:
    envelope = build_response_format({"type": "string"}, name="plain", strict=False)

    assert envelope["json_schema"] == {
        "name": "plain",
        "schema": {"type": "string"},
        "strict": False,
    }


@pytest.mark.parametrize("name", ["", "has space", "x" * 65, "dots.not.allowed"])
def test_rejects_invalid_names(name: str) -> None:
    with pytest.raises(ResponseFormatError, match="Response format name"):
        build_response_format(Definition(), name=name)


def test_rejects_unsupported_schema_values() -> None:
    with pytest.raises(ResponseFormatError, match="must be a Definition or a mapping"):
        build_response_format(["not", "a", "schema"], name="bad")  # type: ignore[arg-type]
