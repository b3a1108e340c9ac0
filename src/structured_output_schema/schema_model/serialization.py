"""Definition rendering to JSON-compatible structures and text."""

from __future__ import annotations

import json
from typing import Any

from .definition import Definition


def definition_to_dict(definition: Definition) -> dict[str, Any]:
    """Render a definition tree to plain dicts in canonical key order.

    Absent or empty attributes are omitted, except ``properties`` which every
    node carries, empty or not. ``additionalProperties`` appears only when the
    producer set it explicitly.
    """
    rendered: dict[str, Any] = {}
    if definition.type is not None:
        rendered["type"] = definition.type.value
    if definition.description:
        rendered["description"] = definition.description
    if definition.enum:
        rendered["enum"] = list(definition.enum)
    properties = definition.properties or {}
    rendered["properties"] = {
        name: definition_to_dict(child) for name, child in properties.items()
    }
    if definition.required:
        rendered["required"] = list(definition.required)
    if definition.items is not None:
        rendered["items"] = definition_to_dict(definition.items)
    if definition.additional_properties is not None:
        rendered["additionalProperties"] = definition.additional_properties
    return rendered


def definition_to_json(definition: Definition, *, indent: int | None = None) -> str:
    """Render a definition tree to JSON text."""
    return json.dumps(definition_to_dict(definition), indent=indent, ensure_ascii=False)


class DefinitionEncoder(json.JSONEncoder):
    """JSON encoder that renders embedded definitions like ``definition_to_dict``."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Definition):
            return definition_to_dict(o)
        return super().default(o)
