"""Recursive schema node building service."""

from __future__ import annotations

import logging
from typing import Any

from function_schema_generator.metadata_resolution.metadata_resolver import (
    resolve_field_metadata,
)
from function_schema_generator.type_introspection.type_descriptors import (
    JSON_PRIMITIVE_TYPES,
    TypeDescriptor,
    TypeTag,
)

_LOGGER = logging.getLogger("function_schema_generator.schema")
_LOGGER.addHandler(logging.NullHandler())

TEMPORAL_JSON_TYPE = "datetime"

SchemaNode = dict[str, Any]


class CyclicTypeError(Exception):
    """Raised when an object type contains itself, directly or through containers."""

    def __init__(self, chain: tuple[TypeDescriptor, ...]) -> None:
        self.type_names = tuple(descriptor.name for descriptor in chain)
        super().__init__(f"Cyclic type reference detected: {' -> '.join(self.type_names)}")


def build_schema(descriptor: TypeDescriptor) -> SchemaNode:
    """Build the schema node for ``descriptor`` and everything nested in it.

    Raises:
      CyclicTypeError: If an object type is reached again while it is being expanded.
      IntrospectionUnavailable: Propagated from the descriptor's field loader.
    """
    return _build_node(descriptor, chain=())


def build_object_schema(descriptor: TypeDescriptor) -> SchemaNode:
    """Build ``descriptor`` through the object path whatever its tag."""
    return _build_object(descriptor, chain=())


def _build_node(descriptor: TypeDescriptor, *, chain: tuple[TypeDescriptor, ...]) -> SchemaNode:
    tag = descriptor.tag
    if tag is TypeTag.TEMPORAL:
        return {"type": TEMPORAL_JSON_TYPE}
    if tag in (TypeTag.ARRAY, TypeTag.COLLECTION):
        return {"type": "array", "items": _build_items(descriptor.element, chain=chain)}
    if tag is TypeTag.PRIMITIVE:
        if descriptor.json_type not in JSON_PRIMITIVE_TYPES:
            raise ValueError(
                f"Primitive {descriptor.name} has no JSON type: {descriptor.json_type!r}."
            )
        return {"type": descriptor.json_type}
    if tag is TypeTag.ENUM:
        return {"type": "string", "enum": list(descriptor.enum_values)}
    if tag is TypeTag.MAP:
        return {"type": "object"}
    return _build_object(descriptor, chain=chain)


def _build_items(
    element: TypeDescriptor | None, *, chain: tuple[TypeDescriptor, ...]
) -> SchemaNode:
    if element is None:
        return {"type": "object"}
    return _build_node(element, chain=chain)


def _build_object(descriptor: TypeDescriptor, *, chain: tuple[TypeDescriptor, ...]) -> SchemaNode:
    identity = descriptor.identity
    if any(entry.identity is identity for entry in chain):
        raise CyclicTypeError(chain + (descriptor,))
    nested_chain = chain + (descriptor,)

    properties: dict[str, SchemaNode] = {}
    required: list[str] = []
    for field in descriptor.fields():
        metadata = resolve_field_metadata(field.name, field.metadata)
        field_schema = _build_node(field.type, chain=nested_chain)
        if metadata.description:
            field_schema["description"] = metadata.description
        if metadata.format:
            field_schema["format"] = metadata.format
        if metadata.name in properties:
            _LOGGER.debug(
                "Property %r of %s overwritten by a later field", metadata.name, descriptor.name
            )
            # The surviving field alone decides whether the name is required.
            if metadata.name in required:
                required.remove(metadata.name)
        properties[metadata.name] = field_schema
        if metadata.required:
            required.append(metadata.name)

    schema: SchemaNode = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema
