"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from structured_output_schema.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schemas.yaml",
        """
targets:
  - type: "app.models:Order"
    output: "out/order.json"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.defaults.strategy == "reflective"
    assert configuration.defaults.indent is None
    assert len(configuration.targets) == 1
    target = configuration.targets[0]
    assert target.type_reference == "app.models:Order"
    assert target.output_path == (tmp_path / "out" / "order.json").resolve()
    assert target.strategy == "reflective"
    assert target.response_format is None


def test_loads_json_configuration_with_overrides(tmp_path: Path) -> None:
    absolute_output = tmp_path / "absolute.json"
    config_path = _write_file(
        tmp_path / "schemas.json",
        json.dumps(
            {
                "defaults": {"strategy": "STRICT", "indent": 2},
                "targets": [
                    {
                        "type": "app.models:Order",
                        "output": "order.json",
                        "strategy": "reflective",
                        "response_format": {
                            "name": "order",
                            "description": "  An order  ",
                        },
                    },
                    {"type": "app.models:Invoice", "output": str(absolute_output)},
                ],
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.defaults.strategy == "strict"
    assert configuration.defaults.indent == 2
    first, second = configuration.targets
    assert first.strategy == "reflective"
    assert first.response_format is not None
    assert first.response_format.name == "order"
    assert first.response_format.description == "An order"
    assert first.response_format.strict is True
    assert second.strategy == "strict"
    assert second.output_path == absolute_output


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "broken.yaml", "targets: [unclosed\n")

    with pytest.raises(ConfigurationError, match="Failed to parse configuration file"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("", "'targets' must be a list"),
        ("- just\n- a list\n", "Configuration root must be a mapping"),
        ("targets: []\n", "'targets' must not be empty"),
        ("targets: [42]\n", "'targets[0]' must be a mapping"),
        ("targets:\n  - output: a.json\n", "targets[0].type must be a string"),
        ("targets:\n  - type: nomodule\n    output: a.json\n", "must look like"),
        ("targets:\n  - type: 'a:B'\n    output: '  '\n", "targets[0].output must not be empty"),
        (
            "targets:\n  - type: 'a:B'\n    output: a.json\n    strategy: fancy\n",
            "targets[0].strategy must be one of",
        ),
        (
            "defaults:\n  indent: 0\ntargets:\n  - type: 'a:B'\n    output: a.json\n",
            "defaults.indent must be greater than zero",
        ),
        (
            "defaults:\n  indent: true\ntargets:\n  - type: 'a:B'\n    output: a.json\n",
            "defaults.indent must be an integer",
        ),
        (
            "defaults: []\ntargets:\n  - type: 'a:B'\n    output: a.json\n",
            "'defaults' must be a mapping",
        ),
        (
            "targets:\n  - type: 'a:B'\n    output: a.json\n"
            "    response_format:\n      strict: true\n",
            "targets[0].response_format.name must be a string",
        ),
        (
            "targets:\n  - type: 'a:B'\n    output: a.json\n"
            "    response_format:\n      name: x\n      strict: 'yes'\n",
            "targets[0].response_format.strict must be a boolean",
        ),
        (
            "targets:\n  - type: 'a:B'\n    output: a.json\n"
            "  - type: 'a:C'\n    output: a.json\n",
            "targets[1].output",
        ),
    ],
)
def test_invalid_configuration_values_raise(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "schemas.yaml", contents)

    with pytest.raises(ConfigurationError) as exc_info:
        load_configuration(config_path)

    assert message in str(exc_info.value)
