"""Strict reflection exports."""

from .strict_reflector import StrictJsonSchemaGenerator, closed_empty_object, generate_strict_schema

__all__ = [
    "StrictJsonSchemaGenerator",
    "closed_empty_object",
    "generate_strict_schema",
]
