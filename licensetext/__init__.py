"""License text normalization and similarity scoring.

Reduces free-form license documents to a canonical normalized form and scores
word-set similarity between two normalized documents.
"""

from .domain import Document
from .matching import length_delta, similarity
from .utils import fingerprint, format_percent, wrap

__version__ = "0.1.0"

__all__ = [
    "Document",
    "similarity",
    "length_delta",
    "fingerprint",
    "wrap",
    "format_percent",
]
