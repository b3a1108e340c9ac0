"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RenderDefaults:
    """Settings applied to every target unless the target overrides them."""

    strategy: str
    indent: int | None


@dataclass(frozen=True)
class ResponseFormatSettings:
    """Envelope settings for wrapping a schema as a response format."""

    name: str
    description: str | None
    strict: bool


@dataclass(frozen=True)
class RenderTarget:
    """One type to render and where to write it."""

    type_reference: str
    output_path: Path
    strategy: str
    response_format: ResponseFormatSettings | None


@dataclass(frozen=True)
class RenderConfiguration:
    """Top-level configuration aggregate."""

    path: Path
    defaults: RenderDefaults
    targets: tuple[RenderTarget, ...]
