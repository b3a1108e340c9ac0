"""Schema rendering use-case service."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from structured_output_schema.configuration import RenderConfiguration, RenderTarget
from structured_output_schema.generation_strategies import StrategyError, get_strategy
from structured_output_schema.response_formats import ResponseFormatError, build_response_format
from structured_output_schema.schema_model import SchemaGenerationError
from structured_output_schema.type_resolution import TypeResolutionError, resolve_type

from .render_contracts import RenderedSchema, RenderRequest

_LOGGER = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when a schema cannot be rendered."""


def render_schema_document(request: RenderRequest) -> dict[str, Any]:
    """Resolve, generate and optionally wrap the schema for one type reference."""
    try:
        strategy = get_strategy(request.strategy)
        target_type = resolve_type(request.type_reference)
        document = strategy.generate_document(target_type)
        if request.response_format_name:
            document = build_response_format(
                document,
                name=request.response_format_name,
                description=request.response_format_description,
                strict=request.response_format_strict,
            )
    except (
        StrategyError,
        TypeResolutionError,
        SchemaGenerationError,
        ResponseFormatError,
    ) as exc:
        raise RenderError(f"{request.type_reference}: {exc}") from exc
    return document


def dump_schema_document(document: dict[str, Any], *, indent: int | None = None) -> str:
    """Render a schema document to JSON text."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


def render_targets(configuration: RenderConfiguration) -> tuple[RenderedSchema, ...]:
    """Render and write every configured target, in configuration order."""
    rendered: list[RenderedSchema] = []
    for target in configuration.targets:
        document = render_schema_document(_request_for_target(target))
        _write_document(target.output_path, document, configuration.defaults.indent)
        rendered.append(
            RenderedSchema(
                type_reference=target.type_reference,
                strategy=target.strategy,
                output_path=target.output_path,
                document=document,
            )
        )
    return tuple(rendered)


def _request_for_target(target: RenderTarget) -> RenderRequest:
    response_format = target.response_format
    if response_format is None:
        return RenderRequest(type_reference=target.type_reference, strategy=target.strategy)
    return RenderRequest(
        type_reference=target.type_reference,
        strategy=target.strategy,
        response_format_name=response_format.name,
        response_format_description=response_format.description,
        response_format_strict=response_format.strict,
    )


def _write_document(output_path: Path, document: dict[str, Any], indent: int | None) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        text = dump_schema_document(document, indent=indent)
        output_path.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise RenderError(f"Cannot write schema to {output_path}: {exc}") from exc
    _LOGGER.debug("Wrote schema document to %s.", output_path)
