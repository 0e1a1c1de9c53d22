"""Document rendering entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PLACEHOLDER_DOCUMENT_TEXT = "{}"


class RenderStatus(str, Enum):
    """Document rendering outcome status."""

    RENDERED = "rendered"
    SERIALIZATION_FAILED = "serialization_failed"


@dataclass(frozen=True)
class RenderedDocument:
    """Outcome of turning a schema document into text."""

    status: RenderStatus
    text: str
    error_message: str | None

    @property
    def is_ok(self) -> bool:
        """Return True when the text is the rendered document."""
        return self.status is RenderStatus.RENDERED

    @staticmethod
    def rendered(text: str) -> RenderedDocument:
        return RenderedDocument(status=RenderStatus.RENDERED, text=text, error_message=None)

    @staticmethod
    def serialization_failed(error: Exception) -> RenderedDocument:
        return RenderedDocument(
            status=RenderStatus.SERIALIZATION_FAILED,
            text=PLACEHOLDER_DOCUMENT_TEXT,
            error_message=str(error) or type(error).__name__,
        )
