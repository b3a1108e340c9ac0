"""Schema node entities."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class DataType(str, Enum):
    """JSON Schema primitive kinds supported by the node model."""

    OBJECT = "object"
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    ARRAY = "array"
    NULL = "null"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Definition:  # pylint: disable=too-many-instance-attributes
    """One JSON Schema node.

    ``type=None`` means the node accepts any value. ``properties`` is left as
    ``None`` when the producer declared none; serialization still renders it
    as an empty mapping. ``additional_properties`` is tri-state: ``None``
    keeps the key out of the rendered document entirely.
    """

    type: DataType | None = None
    description: str = ""
    enum: tuple[str, ...] = ()
    properties: Mapping[str, Definition] | None = None
    required: tuple[str, ...] = ()
    items: Definition | None = None
    additional_properties: bool | None = None

    def __post_init__(self) -> None:
        if self.type is not None and not isinstance(self.type, DataType):
            object.__setattr__(self, "type", DataType(self.type))
        object.__setattr__(self, "enum", _as_string_tuple(self.enum, "enum"))
        object.__setattr__(self, "required", _as_string_tuple(self.required, "required"))
        if self.properties is not None:
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __hash__(self) -> int:
        properties = None if self.properties is None else frozenset(self.properties.items())
        return hash(
            (
                self.type,
                self.description,
                self.enum,
                properties,
                self.required,
                self.items,
                self.additional_properties,
            )
        )

    @property
    def is_object(self) -> bool:
        return self.type is DataType.OBJECT

    @property
    def is_array(self) -> bool:
        return self.type is DataType.ARRAY


def empty_object() -> Definition:
    """Return an object node with no declared properties."""
    return Definition(type=DataType.OBJECT, properties={})


def _as_string_tuple(values: Sequence[str] | None, label: str) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        raise TypeError(f"Definition.{label} must be a sequence of strings, not a string.")
    return tuple(values)
