"""Infrastructure Services.

Concrete implementations of domain collaborators that deal with technical
concerns. Only document rendering lives here; token handling is a domain
service.
"""

from .rendering import DocumentRenderer, PersonEntry

__all__ = [
    "DocumentRenderer",
    "PersonEntry",
]
