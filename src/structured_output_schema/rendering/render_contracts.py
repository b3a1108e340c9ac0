"""Rendering entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RenderRequest:
    """Input contract for rendering one type."""

    type_reference: str
    strategy: str
    response_format_name: str | None = None
    response_format_description: str | None = None
    response_format_strict: bool = True


@dataclass(frozen=True)
class RenderedSchema:
    """Output contract for one rendered and written schema."""

    type_reference: str
    strategy: str
    output_path: Path
    document: dict[str, Any]
