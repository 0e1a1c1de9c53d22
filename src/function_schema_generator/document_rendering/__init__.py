"""Document rendering exports."""

from .json_document_renderer import JsonDocumentRenderer, render_document
from .render_outcomes import PLACEHOLDER_DOCUMENT_TEXT, RenderedDocument, RenderStatus

__all__ = [
    "PLACEHOLDER_DOCUMENT_TEXT",
    "JsonDocumentRenderer",
    "RenderStatus",
    "RenderedDocument",
    "render_document",
]
