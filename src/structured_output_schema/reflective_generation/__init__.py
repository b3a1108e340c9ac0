"""Reflective generation exports."""

from .field_annotations import (
    SCHEMA_METADATA_KEY,
    FieldAnnotations,
    parse_enum_literals,
    read_field_annotations,
    schema_field,
)
from .reflective_generator import ReflectiveSchemaGenerator, generate_definition
from .type_shapes import (
    DynamicShape,
    MappingShape,
    PrimitiveShape,
    SequenceShape,
    StructShape,
    TypeShape,
    UnsupportedShape,
    classify_type,
    unwrap_type,
)

__all__ = [
    "SCHEMA_METADATA_KEY",
    "DynamicShape",
    "FieldAnnotations",
    "MappingShape",
    "PrimitiveShape",
    "ReflectiveSchemaGenerator",
    "SequenceShape",
    "StructShape",
    "TypeShape",
    "UnsupportedShape",
    "classify_type",
    "generate_definition",
    "parse_enum_literals",
    "read_field_annotations",
    "schema_field",
    "unwrap_type",
]
