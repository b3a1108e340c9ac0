"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from structured_output_schema.generation_strategies import DEFAULT_STRATEGY, STRATEGY_NAMES

from .runtime_settings import (
    RenderConfiguration,
    RenderDefaults,
    RenderTarget,
    ResponseFormatSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> RenderConfiguration:
    """Load and validate the render configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    defaults = _parse_defaults_section(parsed.get("defaults"))
    targets = _parse_targets_section(parsed.get("targets"), defaults, path.parent)

    return RenderConfiguration(path=path, defaults=defaults, targets=targets)


def _parse_defaults_section(value: Any) -> RenderDefaults:
    if value is None:
        return RenderDefaults(strategy=DEFAULT_STRATEGY, indent=None)
    section = _require_mapping(value, "defaults")
    strategy = _parse_strategy(section.get("strategy", DEFAULT_STRATEGY), "defaults.strategy")
    indent_value = section.get("indent")
    indent = (
        None if indent_value is None else _require_positive_int(indent_value, "defaults.indent")
    )
    return RenderDefaults(strategy=strategy, indent=indent)


def _parse_targets_section(
    value: Any, defaults: RenderDefaults, base_path: Path
) -> tuple[RenderTarget, ...]:
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigurationError("Configuration section 'targets' must be a list.")
    if not value:
        raise ConfigurationError("Configuration section 'targets' must not be empty.")

    targets: list[RenderTarget] = []
    seen_outputs: set[Path] = set()
    for index, entry in enumerate(value):
        label = f"targets[{index}]"
        target = _parse_target(entry, label, defaults, base_path)
        if target.output_path in seen_outputs:
            raise ConfigurationError(f"{label}.output '{target.output_path}' is used twice.")
        seen_outputs.add(target.output_path)
        targets.append(target)
    return tuple(targets)


def _parse_target(
    value: Any, label: str, defaults: RenderDefaults, base_path: Path
) -> RenderTarget:
    section = _require_mapping(value, label)
    type_reference = _require_non_empty_string(section.get("type"), f"{label}.type")
    if ":" not in type_reference:
        raise ConfigurationError(f"{label}.type must look like 'package.module:QualName'.")
    output = _require_non_empty_string(section.get("output"), f"{label}.output")
    strategy_value = section.get("strategy")
    strategy = (
        defaults.strategy
        if strategy_value is None
        else _parse_strategy(strategy_value, f"{label}.strategy")
    )
    response_format = _parse_response_format(
        section.get("response_format"), f"{label}.response_format"
    )
    return RenderTarget(
        type_reference=type_reference,
        output_path=_resolve_path(base_path, output),
        strategy=strategy,
        response_format=response_format,
    )


def _parse_response_format(value: Any, label: str) -> ResponseFormatSettings | None:
    if value is None:
        return None
    section = _require_mapping(value, label)
    name = _require_non_empty_string(section.get("name"), f"{label}.name")
    description = _optional_string(section.get("description"), f"{label}.description")
    strict = section.get("strict", True)
    if not isinstance(strict, bool):
        raise ConfigurationError(f"{label}.strict must be a boolean.")
    return ResponseFormatSettings(name=name, description=description, strict=strict)


def _parse_strategy(value: Any, field_name: str) -> str:
    strategy = _require_non_empty_string(value, field_name).lower()
    if strategy not in STRATEGY_NAMES:
        raise ConfigurationError(
            f"{field_name} must be one of: {', '.join(STRATEGY_NAMES)}."
        )
    return strategy


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
