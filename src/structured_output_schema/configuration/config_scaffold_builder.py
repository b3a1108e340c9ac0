"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schemas.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Render configuration template for structured-output-schema.
# Replace every <REQUIRED> placeholder before running render.
# Remove <OPTIONAL> entries you do not need.

defaults:
  # Generation strategy: reflective (dataclass walker) or strict (pydantic, closed and inlined).
  strategy: reflective
  # indent: 2

targets:
  # One entry per type; type is an importable 'package.module:QualName' reference.
  - type: "<REQUIRED>"
    # Output path, relative to this file.
    output: "<REQUIRED>"
    # strategy: strict
    # Wrap the schema in a json_schema response_format envelope.
    # response_format:
    #   name: "<OPTIONAL>"
    #   description: "<OPTIONAL>"
    #   strict: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML render configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder render configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
