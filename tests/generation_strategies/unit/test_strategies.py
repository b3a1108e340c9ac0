"""Generation strategy contract tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
from structured_output_schema.generation_strategies import (
    REFLECTIVE_STRATEGY,
    STRATEGY_NAMES,
    STRICT_STRATEGY,
    ReflectiveStrategy,
    StrategyError,
    StrictStrategy,
    get_strategy,
)


@dataclass
class Measurement:
    label: str
    count: int
    ratio: float
    valid: bool
    tags: list[str]


@dataclass
class Chain:
    name: str
    links: list[Chain] = field(default_factory=list)


def test_strategy_names_are_registered() -> None:
    assert STRATEGY_NAMES == (REFLECTIVE_STRATEGY, STRICT_STRATEGY)
    assert isinstance(get_strategy("reflective"), ReflectiveStrategy)
    assert isinstance(get_strategy(" STRICT "), StrictStrategy)


def test_unknown_strategy_raises() -> None:
    with pytest.raises(StrategyError, match="Unknown schema strategy 'fancy'"):
        get_strategy("fancy")


@pytest.mark.parametrize("strategy_name", STRATEGY_NAMES)
def test_struct_properties_and_primitive_kinds_agree(strategy_name: str) -> None:
    document = get_strategy(strategy_name).generate_document(Measurement)
    properties = document["properties"]

    assert document["type"] == "object"
    assert list(properties) == ["label", "count", "ratio", "valid", "tags"]
    assert properties["label"]["type"] == "string"
    assert properties["count"]["type"] == "integer"
    assert properties["ratio"]["type"] == "number"
    assert properties["valid"]["type"] == "boolean"
    assert properties["tags"]["type"] == "array"
    assert properties["tags"]["items"]["type"] == "string"
    assert document["required"] == ["label", "count", "ratio", "valid", "tags"]


@pytest.mark.parametrize("strategy_name", STRATEGY_NAMES)
def test_recursive_types_terminate(strategy_name: str) -> None:
    document = get_strategy(strategy_name).generate_document(Chain)
    recursive = document["properties"]["links"]["items"]

    assert recursive["type"] == "object"
    assert recursive["properties"] == {}


def test_only_strict_strategy_closes_objects() -> None:
    reflective = get_strategy(REFLECTIVE_STRATEGY).generate_document(Measurement)
    strict = get_strategy(STRICT_STRATEGY).generate_document(Measurement)

    assert "additionalProperties" not in reflective
    assert strict["additionalProperties"] is False


@pytest.mark.parametrize("strategy_name", STRATEGY_NAMES)
def test_documents_are_plain_json_values(strategy_name: str) -> None:
    document: Any = get_strategy(strategy_name).generate_document(list[int])

    assert document["type"] == "array"
    assert document["items"]["type"] == "integer"
