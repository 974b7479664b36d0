"""Domain model for license documents."""

from .document import Document

__all__ = ["Document"]
