"""Metadata override resolution service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .schema_info import SchemaInfo

CLASS_DESCRIPTION_FALLBACK = "No description provided."


class MetadataScope(str, Enum):
    """Level at which an override was declared."""

    CLASS = "class"
    FIELD = "field"


@dataclass(frozen=True)
class EffectiveMetadata:
    """Override-merged attributes of one type or field."""

    name: str
    description: str | None
    required: bool
    format: str | None
    additional_properties: bool | None
    strict: bool


def resolve_metadata(
    default_name: str, override: SchemaInfo | None, scope: MetadataScope
) -> EffectiveMetadata:
    """Merge ``override`` over the defaults of ``scope``.

    Never fails: absent or malformed override values fall back to defaults.
    ``additional_properties`` is ``None`` (omit the key) unless a class-level
    override is present.
    """
    is_class = scope is MetadataScope.CLASS
    if override is None:
        return EffectiveMetadata(
            name=default_name,
            description=CLASS_DESCRIPTION_FALLBACK if is_class else None,
            required=False,
            format=None,
            additional_properties=None,
            strict=False,
        )

    description = _non_empty_text(override.description)
    if description is None and is_class:
        description = CLASS_DESCRIPTION_FALLBACK
    return EffectiveMetadata(
        name=_non_empty_text(override.name) or default_name,
        description=description,
        required=_flag(override.required),
        format=None if is_class else _non_empty_text(override.format),
        additional_properties=_flag(override.additional_properties) if is_class else None,
        strict=_flag(override.strict) if is_class else False,
    )


def resolve_class_metadata(default_name: str, override: SchemaInfo | None) -> EffectiveMetadata:
    """Resolve a type-level override; ``default_name`` is the type's simple name."""
    return resolve_metadata(default_name, override, MetadataScope.CLASS)


def resolve_field_metadata(default_name: str, override: SchemaInfo | None) -> EffectiveMetadata:
    """Resolve a field-level override; ``default_name`` is the declared field name."""
    return resolve_metadata(default_name, override, MetadataScope.FIELD)


def _non_empty_text(value: object) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return None
    return value


def _flag(value: object) -> bool:
    return value if isinstance(value, bool) else False
