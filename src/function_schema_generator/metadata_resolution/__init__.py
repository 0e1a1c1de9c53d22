"""Metadata resolution exports."""

from .metadata_resolver import (
    CLASS_DESCRIPTION_FALLBACK,
    EffectiveMetadata,
    MetadataScope,
    resolve_class_metadata,
    resolve_field_metadata,
    resolve_metadata,
)
from .schema_info import SCHEMA_INFO_ATTRIBUTE, SCHEMA_INFO_METADATA_KEY, SchemaInfo, schema_info

__all__ = [
    "CLASS_DESCRIPTION_FALLBACK",
    "EffectiveMetadata",
    "MetadataScope",
    "SCHEMA_INFO_ATTRIBUTE",
    "SCHEMA_INFO_METADATA_KEY",
    "SchemaInfo",
    "resolve_class_metadata",
    "resolve_field_metadata",
    "resolve_metadata",
    "schema_info",
]
