"""Structured-output ``response_format`` envelopes for chat requests."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from structured_output_schema.schema_model import Definition, definition_to_dict

RESPONSE_FORMAT_TYPE = "json_schema"
_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class ResponseFormatError(Exception):
    """Raised when a response format envelope cannot be built."""


def build_response_format(
    schema: Definition | Mapping[str, Any],
    *,
    name: str,
    description: str | None = None,
    strict: bool = True,
) -> dict[str, Any]:
    """Wrap a schema in the ``json_schema`` response format envelope.

    Args:
      schema: Generated definition tree or an already rendered schema document.
      name: Schema name, 1-64 characters of letters, digits, ``_`` or ``-``.
      description: Optional description of what the response is for.
      strict: Whether the consumer must follow the schema exactly.

    Returns:
      ``{"type": "json_schema", "json_schema": {...}}`` ready to attach to a request.

    Raises:
      ResponseFormatError: If the name or schema is invalid.
    """
    if not isinstance(name, str) or not _NAME_PATTERN.fullmatch(name):
        raise ResponseFormatError(
            f"Response format name '{name}' must be 1-64 characters of letters, digits, '_' or '-'."
        )
    if isinstance(schema, Definition):
        rendered_schema = definition_to_dict(schema)
    elif isinstance(schema, Mapping):
        rendered_schema = dict(schema)
    else:
        raise ResponseFormatError("Response format schema must be a Definition or a mapping.")

    json_schema: dict[str, Any] = {"name": name}
    if description:
        json_schema["description"] = description
    json_schema["schema"] = rendered_schema
    json_schema["strict"] = strict
    return {"type": RESPONSE_FORMAT_TYPE, "json_schema": json_schema}
