"""Schema generation entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GeneratedSchema:
    """One target rendered to disk."""

    target: str
    function_name: str
    output_path: Path


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one configured generation run."""

    output_dir: Path
    schemas: tuple[GeneratedSchema, ...]

    @property
    def written_paths(self) -> tuple[Path, ...]:
        return tuple(schema.output_path for schema in self.schemas)
