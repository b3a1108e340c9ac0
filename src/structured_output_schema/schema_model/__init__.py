"""Schema node model exports."""

from .definition import DataType, Definition, empty_object
from .generation_errors import SchemaGenerationError
from .serialization import DefinitionEncoder, definition_to_dict, definition_to_json

__all__ = [
    "DataType",
    "Definition",
    "DefinitionEncoder",
    "SchemaGenerationError",
    "definition_to_dict",
    "definition_to_json",
    "empty_object",
]
