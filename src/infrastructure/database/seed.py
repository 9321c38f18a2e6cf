"""Demo data loaded into an empty people store.

The identifiers are fixed so that lab exercises and tests can refer to them.
"""

from datetime import datetime, timezone

from sqlmodel import Session

from src.core.logging import logger
from src.domain.entities.person import Person
from src.domain.value_objects.role import Role
from src.infrastructure.repositories.person_repository import PersonRepository

ID_ALAN_TURING = "62472b90-14a5-45b5-891e-14f9e5659680"
ID_MARGHERITA_HACK = "46005e2d-4faa-4c5a-8ed2-6876d63622a7"
ID_RICHARD_FEYNMAN = "3ad86124-765a-4104-a2dd-e99335ff1260"
ID_ADA_LOVELACE = "c0f1b6f2-6a47-4e0c-9d54-2b8e1f6a9d31"

DEMO_PEOPLE = [
    (ID_ALAN_TURING, "Alan", "Turing", "Mathematician", Role.GUEST),
    (ID_MARGHERITA_HACK, "Margherita", "Hack", "Astrophysicist", Role.USER),
    (ID_RICHARD_FEYNMAN, "Richard", "Feynman", "Physicist", Role.ADMIN),
    (ID_ADA_LOVELACE, "Ada", "Lovelace", "Mathematician", None),
]


def seed_demo_people(session: Session) -> int:
    """Insert the demo people when the store is empty.

    Returns:
        int: Number of people inserted.
    """
    repository = PersonRepository(session)
    if repository.count():
        return 0
    for person_uuid, first_name, last_name, title, min_role in DEMO_PEOPLE:
        repository.add(
            Person(
                uuid=person_uuid,
                first_name=first_name,
                last_name=last_name,
                title=title,
                min_role=min_role,
                creation_date=datetime.now(timezone.utc),
            )
        )
    logger.info("demo_people_seeded", count=len(DEMO_PEOPLE))
    return len(DEMO_PEOPLE)
