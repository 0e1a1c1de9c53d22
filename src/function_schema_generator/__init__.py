"""Generate LLM function-calling schema documents from Python types."""

from .document_rendering import RenderedDocument, RenderStatus
from .generation import generate, generate_document
from .metadata_resolution import SchemaInfo, schema_info
from .schema_building import CyclicTypeError, build_root, build_schema
from .type_introspection import IntrospectionUnavailable

__all__ = [
    "CyclicTypeError",
    "IntrospectionUnavailable",
    "RenderStatus",
    "RenderedDocument",
    "SchemaInfo",
    "build_root",
    "build_schema",
    "generate",
    "generate_document",
    "schema_info",
]
