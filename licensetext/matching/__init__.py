"""Word-set extraction and similarity scoring.

This module provides:
- FieldGrammar / DEFAULT_FIELD_GRAMMAR: Substitutable field recognition
- tokenize / extract_fields / remove_fields: Word-set extraction
- SimilarityScorer / SimilarityResult: Overlap-based similarity scoring
- similarity / length_delta: Convenience functions over two documents
"""

from licensetext.registry.fields import DEFAULT_FIELD_GRAMMAR, LICENSE_FIELDS, BracketFieldGrammar, FieldGrammar

from .engine import SimilarityScorer, fields_adjusted_length_delta, length_delta, similarity
from .models import Comparable, SimilarityResult
from .wordsets import WORD_REGEX, extract_fields, remove_fields, tokenize

__all__ = [
    "SimilarityScorer",
    "SimilarityResult",
    "Comparable",
    "similarity",
    "length_delta",
    "fields_adjusted_length_delta",
    "FieldGrammar",
    "BracketFieldGrammar",
    "DEFAULT_FIELD_GRAMMAR",
    "LICENSE_FIELDS",
    "WORD_REGEX",
    "tokenize",
    "extract_fields",
    "remove_fields",
]
