"""Python type hint introspection service."""

from __future__ import annotations

import collections
import collections.abc
import dataclasses
import datetime
import decimal
import enum
import inspect
import logging
import types
import typing
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from function_schema_generator.metadata_resolution.schema_info import (
    SCHEMA_INFO_ATTRIBUTE,
    SCHEMA_INFO_METADATA_KEY,
    SchemaInfo,
)

from .type_descriptors import FieldDescriptor, TypeDescriptor

_LOGGER = logging.getLogger("function_schema_generator.introspection")
_LOGGER.addHandler(logging.NullHandler())

TEMPORAL_TYPES: frozenset[type] = frozenset(
    {datetime.date, datetime.datetime, datetime.time}
)

PRIMITIVE_JSON_TYPES: dict[type, str] = {
    bool: "boolean",
    int: "integer",
    float: "number",
    decimal.Decimal: "number",
    str: "string",
}

_COLLECTION_ORIGINS: tuple[type, ...] = (
    list,
    set,
    frozenset,
    collections.deque,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Collection,
    collections.abc.Iterable,
)

_MAP_ORIGINS: tuple[type, ...] = (
    dict,
    collections.OrderedDict,
    collections.defaultdict,
    collections.Counter,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
)

_UNION_ORIGINS = (typing.Union, types.UnionType)

_QUALIFIER_ORIGINS = (typing.Annotated, typing.Required, typing.NotRequired)


class IntrospectionUnavailable(Exception):
    """Raised when the fields or metadata of a type cannot be enumerated."""


def describe_type(type_hint: Any) -> TypeDescriptor:
    """Describe ``type_hint`` as a Type Descriptor.

    Classification follows a fixed precedence: temporal, array, collection,
    primitive, enum, map, and finally object for everything else.
    """
    type_hint = _strip_wrappers(type_hint)
    origin = typing.get_origin(type_hint)
    name = _simple_name(type_hint)

    if type_hint in TEMPORAL_TYPES:
        return TypeDescriptor.temporal(name, source=type_hint)
    if type_hint is tuple or origin is tuple:
        return TypeDescriptor.array(name, _tuple_element(type_hint), source=type_hint)
    if _is_collection(type_hint, origin):
        return TypeDescriptor.collection(name, _single_element(type_hint), source=type_hint)
    if type_hint in PRIMITIVE_JSON_TYPES:
        return TypeDescriptor.primitive(name, PRIMITIVE_JSON_TYPES[type_hint], source=type_hint)
    if inspect.isclass(type_hint) and issubclass(type_hint, enum.Enum):
        return TypeDescriptor.enum(name, [member.name for member in type_hint], source=type_hint)
    if origin is typing.Literal:
        return TypeDescriptor.enum(
            name, [_literal_text(value) for value in typing.get_args(type_hint)], source=type_hint
        )
    if _is_typed_dict(type_hint):
        return _describe_object(type_hint)
    if _is_map(type_hint, origin):
        return TypeDescriptor.map(name, source=type_hint)
    return _describe_object(type_hint)


def describe_root(target: Any) -> TypeDescriptor:
    """Describe ``target`` as an object, whatever category it would classify as."""
    return _describe_object(_strip_wrappers(target))


def describe_fields(
    owner: Any, type_arguments: Mapping[Any, Any] | None = None
) -> tuple[FieldDescriptor, ...]:
    """Return the declared data fields of ``owner`` in declaration order.

    Class-level storage (``ClassVar``) and dunder names are not data and never
    appear. ``type_arguments`` binds the type variables of a generic ``owner``
    (``{T: int}`` for ``Box[int]``); unbound variables describe as fieldless
    objects. Non-class hints have no fields.
    """
    if not inspect.isclass(owner):
        return ()
    hints = _resolved_hints(owner)
    descriptors: list[FieldDescriptor] = []
    for field_name, declared, field_override in _declared_fields(owner, hints):
        if _is_dunder(field_name) or _is_class_var(declared):
            continue
        declared = _bind_type_variables(declared, type_arguments or {})
        override = _annotated_override(declared) or field_override
        descriptors.append(
            FieldDescriptor(name=field_name, type=describe_type(declared), metadata=override)
        )
    _LOGGER.debug("Described %d field(s) of %s", len(descriptors), owner.__qualname__)
    return tuple(descriptors)


def read_class_override(owner: Any) -> SchemaInfo | None:
    """Return the class-level override declared directly on ``owner``.

    Overrides are not inherited: a subclass without its own decorator has none.
    """
    if not inspect.isclass(owner):
        return None
    candidate = owner.__dict__.get(SCHEMA_INFO_ATTRIBUTE)
    return candidate if isinstance(candidate, SchemaInfo) else None


def _describe_object(type_hint: Any) -> TypeDescriptor:
    owner, type_arguments = _generic_owner(type_hint)
    return TypeDescriptor.object(
        _simple_name(type_hint),
        lambda: describe_fields(owner, type_arguments),
        metadata=read_class_override(owner),
        source=owner,
    )


def _generic_owner(type_hint: Any) -> tuple[Any, dict[Any, Any]]:
    """Split ``Box[int]`` into the ``Box`` class and its ``{T: int}`` bindings."""
    origin = typing.get_origin(type_hint)
    if not inspect.isclass(origin) or origin in _UNION_ORIGINS:
        return type_hint, {}
    parameters = getattr(origin, "__parameters__", ())
    arguments = typing.get_args(type_hint)
    if len(parameters) != len(arguments):
        return origin, {}
    return origin, dict(zip(parameters, arguments))


def _bind_type_variables(type_hint: Any, type_arguments: Mapping[Any, Any]) -> Any:
    if not type_arguments:
        return type_hint
    if isinstance(type_hint, typing.TypeVar):
        return type_arguments.get(type_hint, type_hint)
    parameters = getattr(type_hint, "__parameters__", ())
    if not parameters or inspect.isclass(type_hint):
        return type_hint
    try:
        return type_hint[
            tuple(type_arguments.get(parameter, parameter) for parameter in parameters)
        ]
    except TypeError:
        _LOGGER.debug("Cannot bind type variables of %r", type_hint)
        return type_hint


def _declared_fields(
    owner: type, hints: dict[str, Any]
) -> list[tuple[str, Any, SchemaInfo | None]]:
    if dataclasses.is_dataclass(owner):
        declared = []
        for field in dataclasses.fields(owner):
            metadata_override = field.metadata.get(SCHEMA_INFO_METADATA_KEY)
            if not isinstance(metadata_override, SchemaInfo):
                metadata_override = None
            declared.append((field.name, hints.get(field.name, field.type), metadata_override))
        return declared
    own_names = inspect.get_annotations(owner)
    return [(name, hints[name], None) for name in own_names if name in hints]


def _resolved_hints(owner: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(owner, include_extras=True)
    except (NameError, TypeError, AttributeError) as exc:
        raise IntrospectionUnavailable(
            f"Cannot resolve field annotations of {owner.__qualname__}: {exc}"
        ) from exc


def _strip_wrappers(type_hint: Any) -> Any:
    while True:
        origin = typing.get_origin(type_hint)
        if origin in _QUALIFIER_ORIGINS:
            type_hint = typing.get_args(type_hint)[0]
            continue
        if origin in _UNION_ORIGINS:
            members = [arg for arg in typing.get_args(type_hint) if arg is not type(None)]
            if len(members) == 1:
                type_hint = members[0]
                continue
        return type_hint


def _annotated_override(type_hint: Any) -> SchemaInfo | None:
    found: SchemaInfo | None = None
    while True:
        origin = typing.get_origin(type_hint)
        if origin in _QUALIFIER_ORIGINS:
            for extra in getattr(type_hint, "__metadata__", ()):
                if isinstance(extra, SchemaInfo):
                    found = extra
            type_hint = typing.get_args(type_hint)[0]
            continue
        if origin in _UNION_ORIGINS:
            members = [arg for arg in typing.get_args(type_hint) if arg is not type(None)]
            if len(members) == 1:
                type_hint = members[0]
                continue
        return found


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _is_typed_dict(type_hint: Any) -> bool:
    owner, _ = _generic_owner(type_hint)
    return typing.is_typeddict(owner)


def _is_class_var(type_hint: Any) -> bool:
    return type_hint is ClassVar or typing.get_origin(type_hint) is ClassVar


def _is_collection(type_hint: Any, origin: Any) -> bool:
    candidate = origin if origin is not None else type_hint
    if not inspect.isclass(candidate) or candidate in (str, bytes, bytearray):
        return False
    if issubclass(candidate, collections.abc.Mapping):
        return False
    return candidate in _COLLECTION_ORIGINS or issubclass(candidate, (list, set, frozenset))


def _is_map(type_hint: Any, origin: Any) -> bool:
    candidate = origin if origin is not None else type_hint
    if not inspect.isclass(candidate):
        return False
    return candidate in _MAP_ORIGINS or issubclass(candidate, dict)


def _single_element(type_hint: Any) -> TypeDescriptor | None:
    arguments = typing.get_args(type_hint)
    if len(arguments) != 1:
        return None
    return describe_type(arguments[0])


def _tuple_element(type_hint: Any) -> TypeDescriptor | None:
    arguments = typing.get_args(type_hint)
    if len(arguments) == 2 and arguments[1] is Ellipsis:
        return describe_type(arguments[0])
    if arguments and _all_same(arguments):
        return describe_type(arguments[0])
    return None


def _all_same(arguments: Sequence[Any]) -> bool:
    first = arguments[0]
    return all(argument == first for argument in arguments[1:])


def _literal_text(value: Any) -> str:
    if isinstance(value, enum.Enum):
        return value.name
    return str(value)


def _simple_name(type_hint: Any) -> str:
    if inspect.isclass(type_hint):
        return type_hint.__name__
    origin = typing.get_origin(type_hint)
    if inspect.isclass(origin):
        return origin.__name__
    return getattr(type_hint, "__name__", None) or repr(type_hint)
