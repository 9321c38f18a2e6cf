from .document_renderer import DocumentRenderer, PersonEntry

__all__ = ["DocumentRenderer", "PersonEntry"]
