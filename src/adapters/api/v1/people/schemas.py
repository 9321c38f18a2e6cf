"""Request and response models of the people endpoints.

JSON keys are camelCase on the wire. The store's internal sequential key is
never part of any model here; persons are identified by their opaque ``uuid``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.domain.value_objects.role import Role

NAME_MAX_LENGTH = 512


def _is_name(value: str) -> bool:
    return all(char.isalpha() or char.isspace() or char == "-" for char in value)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AddPersonRequest(_CamelModel):
    """Payload expected by ``POST``/``PUT /doc/person/add``."""

    first_name: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["Marie"])
    last_name: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["Curie"])
    title: str = Field(..., max_length=NAME_MAX_LENGTH, examples=["Physicist"])
    min_role: Optional[Role] = Field(
        default=None,
        examples=["guest"],
        description="Minimum role required to see the person; empty means unrestricted.",
    )

    @field_validator("first_name", "last_name", "title")
    @classmethod
    def _letters_spaces_hyphens(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        if not _is_name(value):
            raise ValueError("may only contain letters, spaces and hyphens")
        return value

    @field_validator("min_role", mode="before")
    @classmethod
    def _empty_role_is_unrestricted(cls, value):
        if value == "":
            return None
        return value


class AddPersonResponse(_CamelModel):
    """Returned by the add endpoint with status 201."""

    uuid: str
    creation_date: datetime


class PersonResponse(_CamelModel):
    """Public view of a person record."""

    model_config = ConfigDict(from_attributes=True)

    uuid: str
    first_name: str
    last_name: str
    title: str
    creation_date: datetime
    min_role: Optional[Role] = None
