"""Repository implementations for the infrastructure layer."""

from .person_repository import PersonRepository
from src.domain.interfaces.repositories import IPersonRepository

__all__ = ["PersonRepository", "IPersonRepository"]
