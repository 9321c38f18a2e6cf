"""Person Repository implementation using SQLModel.

Concrete people store behind `IPersonRepository`. Reads run concurrently;
writes are serialised by a process-wide lock so that, for example, two
concurrent deletes of the same identifier cannot both report success.
"""

import threading
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from structlog import get_logger

from src.core.exceptions import DatabaseError
from src.domain.entities.person import Person
from src.domain.interfaces.repositories import IPersonRepository

logger = get_logger(__name__)

_write_lock = threading.Lock()


class PersonRepository(IPersonRepository):
    """SQLModel implementation of the people store.

    Args:
        db_session: Session bound to the current request.
    """

    def __init__(self, db_session: Session):
        self.db_session = db_session

    def get_by_uuid(self, person_uuid: str) -> Optional[Person]:
        try:
            statement = select(Person).where(Person.uuid == person_uuid)
            person = self.db_session.exec(statement).first()
        except SQLAlchemyError as exc:
            logger.error("Person lookup failed", error=str(exc))
            raise DatabaseError("Person lookup failed") from exc
        logger.debug("Person lookup completed", found=person is not None)
        return person

    def list_ordered(self) -> List[Person]:
        try:
            statement = select(Person).order_by(Person.last_name, Person.first_name, Person.id)
            return list(self.db_session.exec(statement).all())
        except SQLAlchemyError as exc:
            logger.error("Person listing failed", error=str(exc))
            raise DatabaseError("Person listing failed") from exc

    def add(self, person: Person) -> Person:
        with _write_lock:
            try:
                self.db_session.add(person)
                self.db_session.commit()
                self.db_session.refresh(person)
            except SQLAlchemyError as exc:
                self.db_session.rollback()
                logger.error("Person insert failed", error=str(exc))
                raise DatabaseError("Person insert failed") from exc
        return person

    def delete_by_uuid(self, person_uuid: str) -> bool:
        with _write_lock:
            try:
                person = self.db_session.exec(
                    select(Person).where(Person.uuid == person_uuid)
                ).first()
                if person is None:
                    return False
                self.db_session.delete(person)
                self.db_session.commit()
            except SQLAlchemyError as exc:
                self.db_session.rollback()
                logger.error("Person delete failed", error=str(exc))
                raise DatabaseError("Person delete failed") from exc
        return True

    def count(self) -> int:
        try:
            return self.db_session.exec(select(func.count()).select_from(Person)).one()
        except SQLAlchemyError as exc:
            raise DatabaseError("Person count failed") from exc
