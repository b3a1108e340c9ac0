"""Declarative per-field schema annotations for dataclass fields."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

_LOGGER = logging.getLogger(__name__)

SCHEMA_METADATA_KEY = "jsonschema"
SKIP_FIELD_NAME = "-"
RECOGNIZED_ANNOTATION_KEYS = frozenset({"name", "optional", "description", "enum", "exclude"})


@dataclass(frozen=True)
class FieldAnnotations:
    """Schema annotations attached to one dataclass field.

    ``enum`` is ``None`` when the field declares no enumeration; an empty
    tuple means an enumeration was declared but parsed to nothing.
    """

    name: str | None = None
    optional: bool = False
    description: str = ""
    enum: tuple[str, ...] | None = None
    exclude: bool = False

    @property
    def skipped(self) -> bool:
        return self.exclude or self.name == SKIP_FIELD_NAME


def schema_field(
    *,
    name: str | None = None,
    optional: bool = False,
    description: str = "",
    enum: str | Sequence[str] | None = None,
    exclude: bool = False,
    **field_kwargs: Any,
) -> Any:
    """Build a ``dataclasses.field`` carrying schema annotations.

    Args:
      name: Serialized property name; ``"-"`` drops the field from the schema.
      optional: Keep the property out of ``required``.
      description: Description for the property node.
      enum: Comma-separated literal list (or a sequence) of allowed values.
      exclude: Drop the field from the schema.
      **field_kwargs: Passed through to ``dataclasses.field``.

    Example:
      >>> @dataclass
      ... class Task:
      ...     state: str = schema_field(enum="pending,active,completed")
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[SCHEMA_METADATA_KEY] = FieldAnnotations(
        name=name,
        optional=optional,
        description=description,
        enum=None if enum is None else parse_enum_literals(enum),
        exclude=exclude,
    )
    return dataclasses.field(metadata=metadata, **field_kwargs)


def read_field_annotations(struct_field: dataclasses.Field[Any]) -> FieldAnnotations:
    """Return the annotations of a dataclass field, or empty ones if absent."""
    raw = struct_field.metadata.get(SCHEMA_METADATA_KEY)
    if raw is None:
        return FieldAnnotations()
    if isinstance(raw, FieldAnnotations):
        return raw
    if isinstance(raw, Mapping):
        return _annotations_from_mapping(raw, struct_field.name)
    _LOGGER.debug(
        "Ignoring unreadable schema annotations on field %s: %r", struct_field.name, raw
    )
    return FieldAnnotations()


def parse_enum_literals(value: Any) -> tuple[str, ...]:
    """Parse an enum annotation into unique values in declared order.

    Strings are split on commas. Blank entries, non-string entries and
    duplicates are dropped; anything unparseable yields an empty tuple.
    """
    if isinstance(value, str):
        candidates = [item.strip() for item in value.split(",")]
    elif isinstance(value, Sequence):
        candidates = [item.strip() for item in value if isinstance(item, str)]
    else:
        return ()
    literals: list[str] = []
    for candidate in candidates:
        if candidate and candidate not in literals:
            literals.append(candidate)
    return tuple(literals)


def _annotations_from_mapping(raw: Mapping[str, Any], field_name: str) -> FieldAnnotations:
    unknown = sorted(str(key) for key in raw if key not in RECOGNIZED_ANNOTATION_KEYS)
    if unknown:
        _LOGGER.debug("Ignoring unknown schema annotation keys on %s: %s", field_name, unknown)
    name = raw.get("name")
    description = raw.get("description")
    enum = raw.get("enum")
    return FieldAnnotations(
        name=name if isinstance(name, str) and name else None,
        optional=bool(raw.get("optional", False)),
        description=description if isinstance(description, str) else "",
        enum=None if enum is None else parse_enum_literals(enum),
        exclude=bool(raw.get("exclude", False)),
    )
