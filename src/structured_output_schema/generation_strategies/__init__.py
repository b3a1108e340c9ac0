"""Generation strategy exports."""

from .strategies import (
    DEFAULT_STRATEGY,
    REFLECTIVE_STRATEGY,
    STRATEGY_NAMES,
    STRICT_STRATEGY,
    ReflectiveStrategy,
    SchemaStrategy,
    StrategyError,
    StrictStrategy,
    get_strategy,
)

__all__ = [
    "DEFAULT_STRATEGY",
    "REFLECTIVE_STRATEGY",
    "STRATEGY_NAMES",
    "STRICT_STRATEGY",
    "ReflectiveStrategy",
    "SchemaStrategy",
    "StrategyError",
    "StrictStrategy",
    "get_strategy",
]
