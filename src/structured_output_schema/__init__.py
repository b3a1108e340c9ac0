"""Type-driven JSON Schema generation for structured-output consumers."""

import logging

from .generation_strategies import get_strategy
from .reflective_generation import ReflectiveSchemaGenerator, generate_definition, schema_field
from .response_formats import build_response_format
from .schema_model import (
    DataType,
    Definition,
    DefinitionEncoder,
    SchemaGenerationError,
    definition_to_dict,
    definition_to_json,
)
from .strict_reflection import generate_strict_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DataType",
    "Definition",
    "DefinitionEncoder",
    "ReflectiveSchemaGenerator",
    "SchemaGenerationError",
    "build_response_format",
    "definition_to_dict",
    "definition_to_json",
    "generate_definition",
    "generate_strict_schema",
    "get_strategy",
    "schema_field",
]
