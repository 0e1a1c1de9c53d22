"""Schema building exports."""

from .function_envelope import build_root
from .schema_builder import CyclicTypeError, build_object_schema, build_schema

__all__ = [
    "CyclicTypeError",
    "build_object_schema",
    "build_root",
    "build_schema",
]
