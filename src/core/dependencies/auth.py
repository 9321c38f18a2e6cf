from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from src.core.dependencies.identity import Identity, TokenServiceDep, get_identity, get_token_service
from src.domain.interfaces.rendering import IDocumentRenderer
from src.domain.services.people.person_service import PersonService
from src.infrastructure.database import get_db
from src.infrastructure.repositories.person_repository import PersonRepository
from src.infrastructure.services.rendering import DocumentRenderer
from src.permissions.dependencies import get_gate_policy
from src.permissions.gates import GatePolicy

__all__ = [
    "get_token_service",
    "get_identity",
    "get_document_renderer",
    "get_person_service",
    "Identity",
    "PeopleService",
    "TokenServiceDep",
]


@lru_cache(maxsize=1)
def get_document_renderer() -> IDocumentRenderer:
    return DocumentRenderer()


DBSession = Annotated[Session, Depends(get_db)]


def get_person_service(
    db_session: DBSession,
    gates: Annotated[GatePolicy, Depends(get_gate_policy)],
    renderer: Annotated[IDocumentRenderer, Depends(get_document_renderer)],
) -> PersonService:
    """Build a `PersonService` bound to the request's database session."""
    return PersonService(PersonRepository(db_session), renderer, gates)


PeopleService = Annotated[PersonService, Depends(get_person_service)]
