"""Function-calling envelope assembly."""

from __future__ import annotations

from typing import Any

from function_schema_generator.metadata_resolution.metadata_resolver import (
    resolve_class_metadata,
)
from function_schema_generator.type_introspection.type_descriptors import TypeDescriptor

from .schema_builder import build_object_schema


def build_root(descriptor: TypeDescriptor) -> dict[str, Any]:
    """Build the complete function-calling document for a root type.

    The root is always expanded as an object. ``strict`` is always emitted on
    the function object; ``additionalProperties`` only when the root type
    carries a class-level override.
    """
    metadata = resolve_class_metadata(descriptor.name, descriptor.metadata)
    parameters = build_object_schema(descriptor)
    if metadata.additional_properties is not None:
        parameters["additionalProperties"] = metadata.additional_properties

    return {
        "type": "function",
        "function": {
            "name": metadata.name,
            "description": metadata.description,
            "strict": metadata.strict,
            "parameters": parameters,
        },
    }
