from .person_service import NewPerson, PersonService

__all__ = ["NewPerson", "PersonService"]
