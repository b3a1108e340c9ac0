"""Validation of decoded JSON data against definition trees."""

from __future__ import annotations

import json
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from structured_output_schema.schema_model import Definition, definition_to_dict


class SchemaValidationError(Exception):
    """Raised when JSON text does not satisfy a definition."""


def build_validator(definition: Definition) -> Draft202012Validator:
    """Return a JSON Schema validator for the rendered ``definition``."""
    return Draft202012Validator(definition_to_dict(definition))


def validate(definition: Definition, data: Any) -> bool:
    """Return whether decoded JSON ``data`` satisfies ``definition``."""
    return bool(build_validator(definition).is_valid(data))


def load_validated(definition: Definition, text: str | bytes) -> Any:
    """Parse JSON text and return the decoded value if it satisfies ``definition``.

    Raises:
      SchemaValidationError: If the text is not JSON or does not match.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaValidationError(f"Invalid JSON: {exc}") from exc
    try:
        build_validator(definition).validate(data)
    except ValidationError as exc:
        location = ".".join(str(part) for part in exc.absolute_path) or "root"
        raise SchemaValidationError(
            f"Data does not match the schema definition at {location}: {exc.message}"
        ) from exc
    return data
