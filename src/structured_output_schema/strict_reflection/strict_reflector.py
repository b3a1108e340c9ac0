"""Closed, reference-free JSON schemas built on pydantic's schema generator."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import PydanticUserError, TypeAdapter
from pydantic.json_schema import GenerateJsonSchema, JsonSchemaMode, JsonSchemaValue

from structured_output_schema.schema_model import SchemaGenerationError

if TYPE_CHECKING:
    from pydantic_core import CoreSchema

_LOGGER = logging.getLogger(__name__)

_DEFS_KEY = "$defs"
_REF_KEY = "$ref"
_DEFS_PREFIX = "#/$defs/"
# Keys holding a mapping of names to subschemas.
_SCHEMA_MAP_KEYS = frozenset({"properties", "patternProperties", "dependentSchemas"})
# Keys holding instance data rather than subschemas.
_DATA_KEYS = frozenset({"default", "examples", "enum", "const"})


class StrictJsonSchemaGenerator(GenerateJsonSchema):
    """pydantic schema generator with a closed, fully inlined output policy.

    Every object node gets ``additionalProperties: false`` unless it already
    carries a value schema for map entries, and every ``$ref`` into ``$defs``
    is replaced by the referenced schema.

    Maps of arbitrary values (``dict[str, Any]``) are closed as well, so they
    only accept ``{}``. Reflectors that leave such maps open accept any keys
    there; declare a typed value (``dict[str, str]``) to keep entries.
    """

    def generate(self, schema: CoreSchema, mode: JsonSchemaMode = "validation") -> JsonSchemaValue:
        document = dict(super().generate(schema, mode=mode))
        definitions = document.pop(_DEFS_KEY, None) or {}
        return _close_and_inline(document, definitions, frozenset())


def generate_strict_schema(type_: Any) -> dict[str, Any]:
    """Generate a closed, reference-free JSON schema for ``type_``.

    Accepts anything pydantic can adapt: models, dataclasses, TypedDicts and
    plain typing constructs.

    Raises:
      SchemaGenerationError: If pydantic cannot build a schema for the type.
    """
    try:
        adapter = TypeAdapter(type_)
        return adapter.json_schema(schema_generator=StrictJsonSchemaGenerator)
    except (PydanticUserError, NameError) as exc:
        raise SchemaGenerationError(
            f"Cannot generate a strict schema for {type_!r}: {exc}"
        ) from exc


def closed_empty_object() -> dict[str, Any]:
    return {"type": "object", "properties": {}, "additionalProperties": False}


def _close_and_inline(
    node: Any, definitions: Mapping[str, Any], active_refs: frozenset[str]
) -> Any:
    if isinstance(node, list):
        return [_close_and_inline(item, definitions, active_refs) for item in node]
    if not isinstance(node, Mapping):
        return node

    reference = node.get(_REF_KEY)
    if isinstance(reference, str) and reference.startswith(_DEFS_PREFIX):
        return _inline_reference(node, reference, definitions, active_refs)

    result: dict[str, Any] = {}
    for key, value in node.items():
        if key == _DEFS_KEY:
            continue
        if key in _DATA_KEYS:
            result[key] = value
        elif key in _SCHEMA_MAP_KEYS and isinstance(value, Mapping):
            result[key] = {
                name: _close_and_inline(child, definitions, active_refs)
                for name, child in value.items()
            }
        else:
            result[key] = _close_and_inline(value, definitions, active_refs)

    if _is_object_node(result) and not isinstance(result.get("additionalProperties"), Mapping):
        result["additionalProperties"] = False
    return result


def _inline_reference(
    node: Mapping[str, Any],
    reference: str,
    definitions: Mapping[str, Any],
    active_refs: frozenset[str],
) -> dict[str, Any]:
    name = reference[len(_DEFS_PREFIX) :]
    if name in active_refs:
        _LOGGER.debug("Recursive reference to %s, emitting closed empty object.", name)
        return closed_empty_object()
    if name not in definitions:
        raise SchemaGenerationError(f"Unresolved schema reference: {reference}")

    resolved = _close_and_inline(definitions[name], definitions, active_refs | {name})
    siblings = {key: value for key, value in node.items() if key != _REF_KEY}
    if siblings:
        resolved = {**resolved, **_close_and_inline(siblings, definitions, active_refs)}
    return resolved


def _is_object_node(node: Mapping[str, Any]) -> bool:
    node_type = node.get("type")
    if node_type == "object":
        return True
    if isinstance(node_type, list) and "object" in node_type:
        return True
    return "properties" in node
