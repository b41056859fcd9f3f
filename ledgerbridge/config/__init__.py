"""Config document loading."""

from .document import ConfigDocument, CoreSection, load_document

__all__ = ["ConfigDocument", "CoreSection", "load_document"]
