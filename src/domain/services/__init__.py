"""Domain Services of the lab.

- Access: the access decision engine (endpoint and object gates)
- People: the resource operations over the people registry
- Auth: bearer token verification and demo issuance
"""

from .access.decision import AccessDecisionEngine
from .auth.token import TokenService
from .people.person_service import PersonService

__all__ = [
    "AccessDecisionEngine",
    "PersonService",
    "TokenService",
]
