"""Document endpoints: the people registry rendered in several formats.

The roles allowed for each format come from the Casbin gate table and are
checked by a route dependency. A document only ever contains the people the
caller is allowed to see.
"""

from fastapi import APIRouter, Depends, Response

from src.core.dependencies.auth import Identity, PeopleService
from src.domain.interfaces.rendering import DocumentFormat
from src.permissions.dependencies import require_operation
from src.permissions.gates import render_operation

router = APIRouter()

_ERROR_RESPONSES = {
    401: {"description": "No valid bearer token"},
    403: {"description": "Caller not allowed for this format"},
    500: {"description": "Document generation failed"},
}


def _document(service, identity, document_format: DocumentFormat) -> Response:
    content = service.render_document(identity, document_format)
    return Response(content=content, media_type=document_format.media_type)


@router.get(
    "/example.md",
    response_class=Response,
    summary="Markdown document (roles: admin, user, guest)",
    responses=_ERROR_RESPONSES,
    dependencies=[Depends(require_operation(render_operation(DocumentFormat.MARKDOWN)))],
)
def markdown_example(identity: Identity, service: PeopleService):
    return _document(service, identity, DocumentFormat.MARKDOWN)


@router.get(
    "/example.html",
    response_class=Response,
    summary="HTML document (roles: admin, user)",
    responses=_ERROR_RESPONSES,
    dependencies=[Depends(require_operation(render_operation(DocumentFormat.HTML)))],
)
def html_example(identity: Identity, service: PeopleService):
    return _document(service, identity, DocumentFormat.HTML)


@router.get(
    "/example.json",
    response_class=Response,
    summary="JSON document (roles: admin, user)",
    responses=_ERROR_RESPONSES,
    dependencies=[Depends(require_operation(render_operation(DocumentFormat.JSON)))],
)
def json_example(identity: Identity, service: PeopleService):
    return _document(service, identity, DocumentFormat.JSON)


@router.get(
    "/example.adoc",
    response_class=Response,
    summary="AsciiDoc document (roles: admin)",
    responses=_ERROR_RESPONSES,
    dependencies=[Depends(require_operation(render_operation(DocumentFormat.ASCIIDOC)))],
)
def asciidoc_example(identity: Identity, service: PeopleService):
    return _document(service, identity, DocumentFormat.ASCIIDOC)


@router.get(
    "/example.pdf",
    response_class=Response,
    summary="PDF document (roles: admin)",
    responses=_ERROR_RESPONSES,
    dependencies=[Depends(require_operation(render_operation(DocumentFormat.PDF)))],
)
def pdf_example(identity: Identity, service: PeopleService):
    return _document(service, identity, DocumentFormat.PDF)
