from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Enum as SAEnum
from sqlmodel import Column, Field, SQLModel, String

from src.domain.value_objects.person_id import PersonId
from src.domain.value_objects.role import Role


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Person(SQLModel, table=True):
    """Represents a person record of the lab's registry.

    The record carries two keys: ``id`` is the store's internal sequential key
    and is never exposed outside the persistence layer; ``uuid`` is the opaque
    identifier handed to API clients. ``min_role`` is the lowest role allowed
    to see the record, ``None`` meaning unrestricted.

    Records are created by the add operation and removed by the delete
    operation; they are never updated in place.
    """

    __tablename__ = "people"

    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        description="Internal sequential key, never exposed.",
    )
    uuid: str = Field(
        default_factory=lambda: str(PersonId.generate()),
        sa_column=Column(String(36), unique=True, index=True, nullable=False),
        description="Opaque external identifier.",
    )
    first_name: str = Field(sa_column=Column(String(512), nullable=False))
    last_name: str = Field(sa_column=Column(String(512), nullable=False))
    title: str = Field(sa_column=Column(String(512), nullable=False))
    creation_date: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Server-assigned creation timestamp.",
    )
    min_role: Optional[Role] = Field(
        default=None,
        sa_column=Column(
            SAEnum(Role, name="role", values_callable=lambda roles: [r.value for r in roles]),
            nullable=True,
        ),
        description="Minimum role required to see this person; None means unrestricted.",
    )

    __table_args__ = ({"extend_existing": True},)

    @property
    def person_id(self) -> PersonId:
        return PersonId(self.uuid)
