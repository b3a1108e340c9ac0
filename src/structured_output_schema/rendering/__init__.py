"""Rendering domain exports."""

from .render_contracts import RenderedSchema, RenderRequest
from .render_use_case import (
    RenderError,
    dump_schema_document,
    render_schema_document,
    render_targets,
)

__all__ = [
    "RenderRequest",
    "RenderedSchema",
    "RenderError",
    "dump_schema_document",
    "render_schema_document",
    "render_targets",
]
