"""Selectable schema generation strategies."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from structured_output_schema.reflective_generation import generate_definition
from structured_output_schema.schema_model import definition_to_dict
from structured_output_schema.strict_reflection import generate_strict_schema

_LOGGER = logging.getLogger(__name__)

REFLECTIVE_STRATEGY = "reflective"
STRICT_STRATEGY = "strict"
DEFAULT_STRATEGY = REFLECTIVE_STRATEGY


class StrategyError(Exception):
    """Raised when a schema strategy name is not recognized."""


class SchemaStrategy(Protocol):
    """Contract shared by all generation strategies."""

    name: str

    def generate_document(self, type_: Any) -> dict[str, Any]:
        """Return the JSON-compatible schema document for ``type_``."""


class ReflectiveStrategy:
    """Hand-rolled reflective generator rendered through the node serializer."""

    name = REFLECTIVE_STRATEGY

    def generate_document(self, type_: Any) -> dict[str, Any]:
        return definition_to_dict(generate_definition(type_))


class StrictStrategy:
    """pydantic-backed generator with closed objects and no references."""

    name = STRICT_STRATEGY

    def generate_document(self, type_: Any) -> dict[str, Any]:
        return generate_strict_schema(type_)


_STRATEGIES: dict[str, type[ReflectiveStrategy] | type[StrictStrategy]] = {
    REFLECTIVE_STRATEGY: ReflectiveStrategy,
    STRICT_STRATEGY: StrictStrategy,
}

STRATEGY_NAMES: tuple[str, ...] = tuple(_STRATEGIES)


def get_strategy(name: str) -> SchemaStrategy:
    """Return a fresh strategy instance for ``name``."""
    normalized = name.strip().lower()
    strategy_cls = _STRATEGIES.get(normalized)
    if strategy_cls is None:
        raise StrategyError(
            f"Unknown schema strategy '{name}'. Expected one of: {', '.join(STRATEGY_NAMES)}."
        )
    _LOGGER.debug("Using %s schema strategy.", normalized)
    return strategy_cls()
