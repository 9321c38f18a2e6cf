"""Domain entities of the lab: the person record stored in the registry."""

from .person import Person

__all__ = ["Person"]
