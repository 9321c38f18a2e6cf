"""Document rendering for the people registry.

Text formats (Markdown, HTML, AsciiDoc) are produced from Jinja2 templates in
the ``templates`` directory; HTML is auto-escaped. JSON is serialised through a
pydantic view model and PDF is drawn with ReportLab.
"""

import io
from pathlib import Path
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from structlog import get_logger

from src.core.exceptions import DocumentRenderError
from src.domain.entities.person import Person
from src.domain.interfaces.rendering import DocumentFormat, IDocumentRenderer

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

DOCUMENT_TITLE = "People"

_TEMPLATE_NAMES = {
    DocumentFormat.MARKDOWN: "people.md",
    DocumentFormat.HTML: "people.html",
    DocumentFormat.ASCIIDOC: "people.adoc",
}

_TABLE_HEADER = ["Name", "Surname", "Title"]


class PersonEntry(BaseModel):
    """Row of a rendered document; carries only the public fields."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    title: str


_entries_adapter = TypeAdapter(List[PersonEntry])


def _table_cell(value: str) -> str:
    return value.replace("|", "\\|")


class DocumentRenderer(IDocumentRenderer):
    """Renders a pre-filtered list of people in one of the supported formats.

    Args:
        templates_dir: Directory holding the text templates.
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
            autoescape=select_autoescape(enabled_extensions=("html",), default=False),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["cell"] = _table_cell

    def render(self, document_format: DocumentFormat, people: Sequence[Person]) -> bytes:
        entries = [PersonEntry.model_validate(person) for person in people]
        try:
            if document_format is DocumentFormat.JSON:
                return _entries_adapter.dump_json(entries, by_alias=True)
            if document_format is DocumentFormat.PDF:
                return self._render_pdf(entries)
            return self._render_template(document_format, entries)
        except (TemplateError, OSError, ValueError) as exc:
            logger.error("Document rendering failed", format=document_format.value, error=str(exc))
            raise DocumentRenderError(f"Cannot render {document_format.value} document") from exc

    def _render_template(self, document_format: DocumentFormat, entries: List[PersonEntry]) -> bytes:
        template = self.jinja_env.get_template(_TEMPLATE_NAMES[document_format])
        content = template.render(title=DOCUMENT_TITLE, header=_TABLE_HEADER, people=entries)
        return content.encode("utf-8")

    def _render_pdf(self, entries: List[PersonEntry]) -> bytes:
        buffer = io.BytesIO()
        styles = getSampleStyleSheet()
        document = SimpleDocTemplate(buffer, pagesize=A4, title=DOCUMENT_TITLE)

        rows = [_TABLE_HEADER] + [[e.first_name, e.last_name, e.title] for e in entries]
        table = Table(rows, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ]
            )
        )
        document.build([Paragraph(DOCUMENT_TITLE, styles["Title"]), Spacer(1, 12), table])
        return buffer.getvalue()
