"""Type introspection entities."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from function_schema_generator.metadata_resolution.schema_info import SchemaInfo

FieldLoader = Callable[[], Sequence["FieldDescriptor"]]

JSON_PRIMITIVE_TYPES: frozenset[str] = frozenset({"boolean", "integer", "number", "string"})


class TypeTag(str, Enum):
    """Shape category of an introspected type."""

    PRIMITIVE = "primitive"
    TEMPORAL = "temporal"
    ARRAY = "array"
    COLLECTION = "collection"
    MAP = "map"
    ENUM = "enum"
    OBJECT = "object"


@dataclass(frozen=True)
class TypeDescriptor:  # pylint: disable=too-many-instance-attributes
    """Introspected shape of one type reference.

    Object fields are loaded on demand through ``field_loader`` so describing a
    type never walks its field types before a consumer asks for them.
    """

    tag: TypeTag
    name: str
    source: Any = None
    element: TypeDescriptor | None = None
    json_type: str | None = None
    enum_values: tuple[str, ...] = ()
    metadata: SchemaInfo | None = None
    field_loader: FieldLoader | None = None

    def fields(self) -> tuple[FieldDescriptor, ...]:
        """Return the declared fields in declaration order."""
        if self.field_loader is None:
            return ()
        return tuple(self.field_loader())

    @property
    def identity(self) -> Any:
        """Identity used to recognise the same type on a recursion path."""
        return self.source if self.source is not None else self

    @staticmethod
    def primitive(name: str, json_type: str, source: Any = None) -> TypeDescriptor:
        if json_type not in JSON_PRIMITIVE_TYPES:
            raise ValueError(f"Unknown JSON primitive type '{json_type}' for {name}.")
        return TypeDescriptor(tag=TypeTag.PRIMITIVE, name=name, source=source, json_type=json_type)

    @staticmethod
    def temporal(name: str, source: Any = None) -> TypeDescriptor:
        return TypeDescriptor(tag=TypeTag.TEMPORAL, name=name, source=source)

    @staticmethod
    def array(
        name: str, element: TypeDescriptor | None, source: Any = None
    ) -> TypeDescriptor:
        return TypeDescriptor(tag=TypeTag.ARRAY, name=name, source=source, element=element)

    @staticmethod
    def collection(
        name: str, element: TypeDescriptor | None, source: Any = None
    ) -> TypeDescriptor:
        return TypeDescriptor(tag=TypeTag.COLLECTION, name=name, source=source, element=element)

    @staticmethod
    def map(name: str, source: Any = None) -> TypeDescriptor:
        return TypeDescriptor(tag=TypeTag.MAP, name=name, source=source)

    @staticmethod
    def enum(name: str, values: Sequence[str], source: Any = None) -> TypeDescriptor:
        return TypeDescriptor(
            tag=TypeTag.ENUM, name=name, source=source, enum_values=tuple(values)
        )

    @staticmethod
    def object(
        name: str,
        fields: Sequence[FieldDescriptor] | FieldLoader = (),
        *,
        metadata: SchemaInfo | None = None,
        source: Any = None,
    ) -> TypeDescriptor:
        loader = fields if callable(fields) else _static_fields(tuple(fields))
        return TypeDescriptor(
            tag=TypeTag.OBJECT,
            name=name,
            source=source,
            metadata=metadata,
            field_loader=loader,
        )


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared field of an object type."""

    name: str
    type: TypeDescriptor
    metadata: SchemaInfo | None = None


def _static_fields(fields: tuple[FieldDescriptor, ...]) -> FieldLoader:
    return lambda: fields
