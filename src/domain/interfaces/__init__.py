"""Domain Interfaces for dependency inversion.

These interfaces define contracts that infrastructure and application
layers must implement:
- Repositories: person persistence
- Rendering: document generation from an already filtered list of people
- Token management: bearer token verification and demo issuance
"""

from .rendering import DocumentFormat, IDocumentRenderer
from .repositories import IPersonRepository
from .token_management import ICredentialVerifier, ITokenIssuer

__all__ = [
    "DocumentFormat",
    "IDocumentRenderer",
    "IPersonRepository",
    "ICredentialVerifier",
    "ITokenIssuer",
]
