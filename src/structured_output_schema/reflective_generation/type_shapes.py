"""Classification of type descriptions into a closed set of shapes."""

from __future__ import annotations

import dataclasses
import types
import typing
from collections import abc
from dataclasses import dataclass
from typing import Annotated, Any, Union, get_args, get_origin

from structured_output_schema.schema_model import DataType

_NONE_TYPE = type(None)
_TEXT_LIKE = (str, bytes, bytearray, memoryview)
_SEQUENCE_ABCS = (abc.Sequence, abc.Set)


@dataclass(frozen=True)
class StructShape:
    """A dataclass whose fields become object properties.

    ``type_arguments`` holds the parameters of a subscripted generic dataclass.
    """

    struct_type: type
    type_arguments: tuple[Any, ...] = ()


@dataclass(frozen=True)
class SequenceShape:
    """A homogeneous collection rendered as an array."""

    item_type: Any


@dataclass(frozen=True)
class MappingShape:
    """A key/value container rendered as an object without properties."""


@dataclass(frozen=True)
class PrimitiveShape:
    """A scalar with a direct JSON Schema kind."""

    data_type: DataType


@dataclass(frozen=True)
class DynamicShape:
    """A fully dynamic type that accepts any value."""


@dataclass(frozen=True)
class UnsupportedShape:
    """Anything without a mapping; generators fall back to string."""

    type_: Any


TypeShape = Union[
    StructShape, SequenceShape, MappingShape, PrimitiveShape, DynamicShape, UnsupportedShape
]


def unwrap_type(type_: Any) -> Any:
    """Strip optional, annotated and NewType wrappers down to the carried type."""
    while True:
        if isinstance(type_, typing.NewType):
            type_ = type_.__supertype__
            continue
        origin = get_origin(type_)
        if origin is Annotated:
            type_ = get_args(type_)[0]
            continue
        if origin is Union or origin is types.UnionType:
            members = [member for member in get_args(type_) if member is not _NONE_TYPE]
            if len(members) == 1:
                type_ = members[0]
                continue
        return type_


def classify_type(type_: Any) -> TypeShape:
    """Map a type description to its shape."""
    type_ = unwrap_type(type_)
    if type_ is Any or type_ is object:
        return DynamicShape()
    if type_ is _NONE_TYPE or type_ is None:
        return PrimitiveShape(DataType.NULL)
    if isinstance(type_, typing.TypeVar):
        if type_.__bound__ is None:
            return DynamicShape()
        return classify_type(type_.__bound__)

    origin = get_origin(type_)
    if origin is not None:
        return _classify_generic(type_, origin)
    if isinstance(type_, type):
        return _classify_class(type_)
    return UnsupportedShape(type_)


def _classify_generic(type_: Any, origin: Any) -> TypeShape:
    if not isinstance(origin, type):
        return UnsupportedShape(type_)
    if dataclasses.is_dataclass(origin):
        return StructShape(origin, get_args(type_))
    if issubclass(origin, abc.Mapping):
        return MappingShape()
    if issubclass(origin, _SEQUENCE_ABCS) and not issubclass(origin, _TEXT_LIKE):
        return SequenceShape(_sequence_item_type(origin, get_args(type_)))
    return UnsupportedShape(type_)


def _sequence_item_type(origin: type, args: tuple[Any, ...]) -> Any:
    if not args:
        return Any
    if issubclass(origin, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        if all(arg == args[0] for arg in args):
            return args[0]
        return Any
    return args[0]


def _classify_class(type_: type) -> TypeShape:
    if dataclasses.is_dataclass(type_):
        return StructShape(type_)
    # bool before int: bool is an int subclass
    if issubclass(type_, bool):
        return PrimitiveShape(DataType.BOOLEAN)
    if issubclass(type_, int):
        return PrimitiveShape(DataType.INTEGER)
    if issubclass(type_, float):
        return PrimitiveShape(DataType.NUMBER)
    if issubclass(type_, str):
        return PrimitiveShape(DataType.STRING)
    if issubclass(type_, abc.Mapping):
        return MappingShape()
    if issubclass(type_, _SEQUENCE_ABCS) and not issubclass(type_, _TEXT_LIKE):
        return SequenceShape(Any)
    return UnsupportedShape(type_)
