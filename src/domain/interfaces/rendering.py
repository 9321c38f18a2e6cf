"""Interface of the document rendering collaborator."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence

from src.domain.entities.person import Person


class DocumentFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"
    ASCIIDOC = "asciidoc"
    PDF = "pdf"
    JSON = "json"

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    DocumentFormat.MARKDOWN: "text/markdown",
    DocumentFormat.HTML: "text/html",
    DocumentFormat.ASCIIDOC: "text/asciidoc",
    DocumentFormat.PDF: "application/pdf",
    DocumentFormat.JSON: "application/json",
}


class IDocumentRenderer(ABC):
    """Turns a list of people into a document.

    The renderer performs no access checks: callers must pass a list that has
    already been filtered for the requesting identity.
    """

    @abstractmethod
    def render(self, document_format: DocumentFormat, people: Sequence[Person]) -> bytes:
        """Render ``people`` in ``document_format``.

        Raises:
            DocumentRenderError: If the document cannot be produced.
        """
        raise NotImplementedError
