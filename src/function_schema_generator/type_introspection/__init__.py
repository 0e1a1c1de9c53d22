"""Type introspection exports."""

from .python_type_introspector import (
    PRIMITIVE_JSON_TYPES,
    TEMPORAL_TYPES,
    IntrospectionUnavailable,
    describe_fields,
    describe_root,
    describe_type,
    read_class_override,
)
from .type_descriptors import JSON_PRIMITIVE_TYPES, FieldDescriptor, TypeDescriptor, TypeTag

__all__ = [
    "JSON_PRIMITIVE_TYPES",
    "PRIMITIVE_JSON_TYPES",
    "TEMPORAL_TYPES",
    "FieldDescriptor",
    "IntrospectionUnavailable",
    "TypeDescriptor",
    "TypeTag",
    "describe_fields",
    "describe_root",
    "describe_type",
    "read_class_override",
]
