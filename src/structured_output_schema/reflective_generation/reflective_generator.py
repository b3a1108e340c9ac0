"""Reflective schema generation over dataclasses and typing constructs."""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import Any

from structured_output_schema.schema_model import (
    DataType,
    Definition,
    SchemaGenerationError,
    empty_object,
)

from .field_annotations import FieldAnnotations, read_field_annotations
from .type_shapes import (
    DynamicShape,
    MappingShape,
    PrimitiveShape,
    SequenceShape,
    StructShape,
    classify_type,
)

_LOGGER = logging.getLogger(__name__)


class ReflectiveSchemaGenerator:
    """Build ``Definition`` trees by walking type descriptions.

    The generator holds no state between calls. The ``visited`` set passed
    through one call tree contains the dataclasses currently being expanded
    on the active recursion path, keyed with their type arguments when
    subscripted. Re-entering one of them yields an empty object node instead
    of recursing forever.
    """

    def generate(self, type_: Any, visited: set[Any] | None = None) -> Definition:
        """Return the schema node describing ``type_``.

        Raises:
          SchemaGenerationError: If field type metadata cannot be resolved.
        """
        if visited is None:
            visited = set()
        shape = classify_type(type_)
        if isinstance(shape, StructShape):
            return self._generate_struct(shape.struct_type, shape.type_arguments, visited)
        if isinstance(shape, SequenceShape):
            return Definition(type=DataType.ARRAY, items=self.generate(shape.item_type, visited))
        if isinstance(shape, MappingShape):
            return empty_object()
        if isinstance(shape, PrimitiveShape):
            return Definition(type=shape.data_type)
        if isinstance(shape, DynamicShape):
            return Definition()
        _LOGGER.debug("No schema mapping for %r, falling back to string.", shape.type_)
        return Definition(type=DataType.STRING)

    def _generate_struct(
        self, struct_type: type, type_arguments: tuple[Any, ...], visited: set[Any]
    ) -> Definition:
        struct_key = _struct_key(struct_type, type_arguments)
        if struct_key in visited:
            _LOGGER.debug(
                "Recursive reference to %s, emitting empty object.", struct_type.__qualname__
            )
            return empty_object()

        field_types = _resolve_field_types(struct_type)
        if type_arguments:
            field_types = _bind_type_arguments(struct_type, type_arguments, field_types)
        properties: dict[str, Definition] = {}
        required: list[str] = []
        visited.add(struct_key)
        try:
            for struct_field in dataclasses.fields(struct_type):
                if struct_field.name.startswith("_"):
                    continue
                annotations = read_field_annotations(struct_field)
                if annotations.skipped:
                    continue
                property_name = annotations.name or struct_field.name
                child = self.generate(field_types[struct_field.name], visited)
                properties[property_name] = _apply_annotations(child, annotations)
                if not annotations.optional and property_name not in required:
                    required.append(property_name)
        finally:
            visited.discard(struct_key)

        return Definition(type=DataType.OBJECT, properties=properties, required=required)


def generate_definition(type_: Any) -> Definition:
    """Generate a schema node for ``type_`` with a fresh cycle guard."""
    return ReflectiveSchemaGenerator().generate(type_)


def _resolve_field_types(struct_type: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(struct_type, include_extras=True)
    except (NameError, TypeError, AttributeError, SyntaxError) as exc:
        raise SchemaGenerationError(
            f"Cannot resolve field types of {struct_type.__qualname__}: {exc}"
        ) from exc


def _struct_key(struct_type: type, type_arguments: tuple[Any, ...]) -> Any:
    if not type_arguments:
        return struct_type
    key = (struct_type, type_arguments)
    try:
        hash(key)
    except TypeError:
        return struct_type
    return key


def _bind_type_arguments(
    struct_type: type, type_arguments: tuple[Any, ...], field_types: dict[str, Any]
) -> dict[str, Any]:
    parameters = getattr(struct_type, "__parameters__", ())
    substitutions = dict(zip(parameters, type_arguments))
    return {name: _substitute(hint, substitutions) for name, hint in field_types.items()}


def _substitute(hint: Any, substitutions: dict[Any, Any]) -> Any:
    if isinstance(hint, typing.TypeVar):
        return substitutions.get(hint, hint)
    parameters = getattr(hint, "__parameters__", ())
    if not parameters or typing.get_origin(hint) is None:
        return hint
    try:
        return hint[tuple(substitutions.get(parameter, parameter) for parameter in parameters)]
    except TypeError:
        return hint


def _apply_annotations(child: Definition, annotations: FieldAnnotations) -> Definition:
    changes: dict[str, Any] = {}
    if annotations.description:
        changes["description"] = annotations.description
    if annotations.enum is not None:
        changes["enum"] = annotations.enum
    if not changes:
        return child
    return dataclasses.replace(child, **changes)
