"""JSON document rendering service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from .render_outcomes import RenderedDocument

_LOGGER = logging.getLogger("function_schema_generator.rendering")
_LOGGER.addHandler(logging.NullHandler())

DEFAULT_INDENT = 2


class JsonDocumentRenderer:
    """Serializer owned by a single generation call.

    Keys keep insertion order, so parsing rendered text and rendering it again
    with the same settings yields identical text.
    """

    def __init__(self, *, indent: int | None = DEFAULT_INDENT, ensure_ascii: bool = False) -> None:
        self._indent = indent if indent else None
        self._ensure_ascii = ensure_ascii

    @property
    def indent(self) -> int | None:
        return self._indent

    def render(self, document: Mapping[str, Any]) -> RenderedDocument:
        """Render ``document`` as JSON text, reporting failures as a distinct outcome."""
        try:
            text = json.dumps(
                document,
                indent=self._indent,
                separators=None if self._indent else (",", ":"),
                ensure_ascii=self._ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            _LOGGER.warning("Schema document could not be serialized: %s", exc)
            return RenderedDocument.serialization_failed(exc)
        return RenderedDocument.rendered(text)


def render_document(
    document: Mapping[str, Any], *, indent: int | None = DEFAULT_INDENT
) -> RenderedDocument:
    """Render ``document`` with a renderer constructed for this call only."""
    return JsonDocumentRenderer(indent=indent).render(document)
