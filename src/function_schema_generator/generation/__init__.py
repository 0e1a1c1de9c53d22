"""Schema generation exports."""

from .generation_contracts import GeneratedSchema, GenerationOutcome
from .schema_generation_use_case import (
    GenerationError,
    generate,
    generate_batch,
    generate_document,
    resolve_target,
)

__all__ = [
    "GeneratedSchema",
    "GenerationError",
    "GenerationOutcome",
    "generate",
    "generate_batch",
    "generate_document",
    "resolve_target",
]
