"""Opaque, non-guessable identifier exposed for person records."""

import secrets
import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PersonId:
    """External identifier of a person.

    The value is 128 random bits rendered in the canonical UUID text form
    (lower-case 8-4-4-4-12 hex). It is unrelated to the store's internal
    sequential key, so knowing one identifier says nothing about the others.
    """

    value: str

    def __post_init__(self):
        if self.parse(self.value) is None:
            raise ValueError("Person ID must be a 128-bit hex identifier")

    @classmethod
    def generate(cls) -> "PersonId":
        return cls(str(uuid.UUID(bytes=secrets.token_bytes(16))))

    @staticmethod
    def parse(raw: str) -> Optional[str]:
        """Return the canonical form of ``raw`` or None when it is malformed."""
        if not isinstance(raw, str) or len(raw) != 36:
            return None
        try:
            return str(uuid.UUID(raw))
        except ValueError:
            return None

    def mask_for_logging(self) -> str:
        return self.value[:8] + "-****"

    def __str__(self) -> str:
        return self.value
