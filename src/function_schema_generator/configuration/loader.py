"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import GenerationSettings, RenderingSettings

DEFAULT_OUTPUT_DIR = "schemas"
DEFAULT_INDENT = 2
_PLACEHOLDER_MARKER = "<REQUIRED>"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> GenerationSettings:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    targets = _parse_targets(parsed.get("targets"))
    output_dir = _parse_output_dir(parsed.get("output_dir", DEFAULT_OUTPUT_DIR), path.parent)
    rendering = _parse_rendering_section(parsed.get("rendering"))

    return GenerationSettings(
        path=path,
        targets=targets,
        output_dir=output_dir,
        rendering=rendering,
    )


def _parse_targets(value: Any) -> tuple[str, ...]:
    if value is None:
        raise ConfigurationError("targets is required.")
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError("targets must be a string or list of strings.")
    targets: list[str] = []
    for item in value:
        reference = _require_non_empty_string(item, "targets entries")
        if reference == _PLACEHOLDER_MARKER:
            raise ConfigurationError("targets still contains the <REQUIRED> placeholder.")
        if ":" not in reference:
            raise ConfigurationError(
                f"Target '{reference}' must use the 'package.module:ClassName' form."
            )
        if reference not in targets:
            targets.append(reference)
    if not targets:
        raise ConfigurationError("targets must contain at least one target.")
    return tuple(targets)


def _parse_output_dir(value: Any, base_path: Path) -> Path:
    raw_path = _require_non_empty_string(value, "output_dir")
    return _resolve_path(base_path, raw_path)


def _parse_rendering_section(value: Any) -> RenderingSettings:
    if value is None:
        return RenderingSettings(indent=DEFAULT_INDENT, ensure_ascii=False)
    section = _require_mapping(value, "rendering")
    indent = _require_non_negative_int(section.get("indent", DEFAULT_INDENT), "rendering.indent")
    ensure_ascii = section.get("ensure_ascii", False)
    if not isinstance(ensure_ascii, bool):
        raise ConfigurationError("rendering.ensure_ascii must be a boolean.")
    return RenderingSettings(indent=indent or None, ensure_ascii=ensure_ascii)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
