"""Repository interfaces for abstracting data persistence in the domain layer.

The domain layer uses these interfaces to interact with persistence mechanisms
without being coupled to any specific technology. The concrete implementations
reside in the `infrastructure` layer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.person import Person


class IPersonRepository(ABC):
    """An interface defining the contract for person persistence operations.

    The store is keyed by the person's opaque identifier. Implementations must
    serialise writes so that two concurrent deletes of the same identifier
    cannot both report success.
    """

    @abstractmethod
    def get_by_uuid(self, person_uuid: str) -> Optional[Person]:
        """Retrieves a person by its external identifier.

        Returns:
            The `Person`, or `None` when no record has that identifier.
        """
        raise NotImplementedError

    @abstractmethod
    def list_ordered(self) -> List[Person]:
        """Returns every person ordered by last name, then first name.

        Ordering is case-sensitive; ties keep insertion order.
        """
        raise NotImplementedError

    @abstractmethod
    def add(self, person: Person) -> Person:
        """Persists a new person and returns it with server-assigned fields set."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_uuid(self, person_uuid: str) -> bool:
        """Removes a person.

        Returns:
            True if a record was removed, False if none matched.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        raise NotImplementedError
