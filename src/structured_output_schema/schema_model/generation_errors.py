"""Errors shared by schema generation strategies."""

from __future__ import annotations


class SchemaGenerationError(Exception):
    """Raised when type metadata cannot be read while generating a schema."""
