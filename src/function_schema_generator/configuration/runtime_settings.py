"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class RenderingSettings:
    """Serializer options applied to every generated document."""

    indent: int | None
    ensure_ascii: bool


@dataclass(frozen=True)
class GenerationSettings:
    """Top-level configuration aggregate."""

    path: Path
    targets: tuple[str, ...]
    output_dir: Path
    rendering: RenderingSettings
