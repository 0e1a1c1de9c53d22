"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-generator.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration for function-schema-generator.
# Replace every <REQUIRED> placeholder before running `run`.

targets:
  # Target references in "package.module:ClassName" form, one per root type.
  - "<REQUIRED>"

# Directory receiving one <function name>.json file per target.
# Relative paths are resolved against this file's directory.
output_dir: "schemas"

rendering:
  # Spaces per indentation level; 0 renders compact single-line JSON.
  indent: 2
  # Escape non-ASCII characters in descriptions.
  ensure_ascii: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generation configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
