"""Schema validation exports."""

from .definition_validator import (
    SchemaValidationError,
    build_validator,
    load_validated,
    validate,
)

__all__ = [
    "SchemaValidationError",
    "build_validator",
    "load_validated",
    "validate",
]
