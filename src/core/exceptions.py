"""Errors raised by the lab and mapped to HTTP responses in `src.core.handlers`.

Every error has a ``message`` that is only ever logged and a ``code`` that
identifies the failure. `AuthenticationError` and `PermissionError` bodies
are generic so a response never says why access was refused.
"""

from typing import Final, Optional

__all__: Final = [
    "LabError",
    "AuthenticationError",
    "PermissionError",
    "ValidationError",
    "DatabaseError",
    "DocumentRenderError",
]


class LabError(Exception):
    """Root of the lab's errors; unhandled subclasses become a 500."""

    default_code: str = "generic_error"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __str__(self) -> str:
        return self.message


class AuthenticationError(LabError):
    """No verified credential where a role is required (401).

    Missing, malformed, badly signed and expired tokens all look the same.
    """

    default_code = "authentication_error"

    def __init__(self, message: str = "authentication_required", code: Optional[str] = None):
        super().__init__(message, code)


class PermissionError(LabError):
    """A verified caller may not do this (403).

    Raised for a missing role, a hidden record and, on find and delete, a
    record that does not exist.
    """

    default_code = "permission_denied"

    def __init__(self, message: str = "forbidden", code: Optional[str] = None):
        super().__init__(message, code)


class ValidationError(LabError):
    """Input the lab cannot act on, such as an unknown role name (400)."""

    default_code = "validation_error"


class DatabaseError(LabError):
    """Store failure; wraps the driver error so SQL stays out of responses (500)."""

    default_code = "database_error"


class DocumentRenderError(LabError):
    """A document format could not be produced (500)."""

    default_code = "document_render_error"
