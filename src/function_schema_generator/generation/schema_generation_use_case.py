"""Schema generation use-case service."""

from __future__ import annotations

import importlib
import logging
from typing import Any

from function_schema_generator.configuration.runtime_settings import GenerationSettings
from function_schema_generator.document_rendering import JsonDocumentRenderer, RenderedDocument
from function_schema_generator.schema_building import CyclicTypeError, build_root
from function_schema_generator.type_introspection import IntrospectionUnavailable, describe_root

from .generation_contracts import GeneratedSchema, GenerationOutcome

_LOGGER = logging.getLogger("function_schema_generator.generation")
_LOGGER.addHandler(logging.NullHandler())


class GenerationError(Exception):
    """Raised when a target cannot be resolved, built or written."""


def generate_document(target: Any) -> dict[str, Any]:
    """Return the function-calling document for ``target`` as a plain mapping.

    Raises:
      IntrospectionUnavailable: If the fields of a type cannot be enumerated.
      CyclicTypeError: If ``target`` contains itself.
    """
    return build_root(describe_root(target))


def generate(target: Any, *, renderer: JsonDocumentRenderer | None = None) -> RenderedDocument:
    """Generate the function-calling document text for ``target``.

    A serialization failure is returned as a ``serialization_failed`` outcome
    rather than raised; check ``is_ok`` before trusting ``text``.
    """
    document = generate_document(target)
    return (renderer or JsonDocumentRenderer()).render(document)


def resolve_target(reference: str) -> Any:
    """Import the object named by a ``package.module:Attr`` reference."""
    module_name, separator, attribute_path = reference.partition(":")
    if not separator or not module_name.strip() or not attribute_path.strip():
        raise GenerationError(
            f"Target '{reference}' must use the 'package.module:ClassName' form."
        )
    try:
        resolved: Any = importlib.import_module(module_name.strip())
    except ImportError as exc:
        raise GenerationError(f"Cannot import module '{module_name}': {exc}") from exc
    for attribute in attribute_path.strip().split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise GenerationError(f"Target '{reference}' does not exist.") from exc
    return resolved


def generate_batch(settings: GenerationSettings) -> GenerationOutcome:
    """Render every configured target into ``<output_dir>/<function name>.json``."""
    renderer = JsonDocumentRenderer(
        indent=settings.rendering.indent,
        ensure_ascii=settings.rendering.ensure_ascii,
    )
    rendered: list[tuple[str, str, str]] = []
    seen_names: dict[str, str] = {}
    for reference in settings.targets:
        function_name, text = _render_target(reference, renderer)
        if function_name in seen_names:
            raise GenerationError(
                f"Targets '{seen_names[function_name]}' and '{reference}' "
                f"both produce function '{function_name}'."
            )
        seen_names[function_name] = reference
        rendered.append((reference, function_name, text))

    try:
        settings.output_dir.mkdir(parents=True, exist_ok=True)
        schemas = tuple(
            _write_schema(settings, reference, function_name, text)
            for reference, function_name, text in rendered
        )
    except OSError as exc:
        raise GenerationError(f"Failed to write schema documents: {exc}") from exc
    return GenerationOutcome(output_dir=settings.output_dir, schemas=schemas)


def _render_target(reference: str, renderer: JsonDocumentRenderer) -> tuple[str, str]:
    target = resolve_target(reference)
    try:
        document = generate_document(target)
    except (IntrospectionUnavailable, CyclicTypeError) as exc:
        raise GenerationError(f"{reference}: {exc}") from exc
    outcome = renderer.render(document)
    if not outcome.is_ok:
        raise GenerationError(f"{reference}: serialization failed: {outcome.error_message}")
    return document["function"]["name"], outcome.text


def _write_schema(
    settings: GenerationSettings, reference: str, function_name: str, text: str
) -> GeneratedSchema:
    output_path = settings.output_dir / f"{function_name}.json"
    output_path.write_text(text + "\n", encoding="utf-8")
    _LOGGER.info("Wrote %s schema to %s", reference, output_path)
    return GeneratedSchema(target=reference, function_name=function_name, output_path=output_path)
