"""Content normalization for license texts.

This module provides:
- StripOp / NormalizeOp: The closed set of named transformation steps
- NormalizationContext: Immutable collaborators and settings for a run
- ContentBuffer: Transformation engine applying strip/normalize steps
- ContentNormalizer: The fixed two-phase normalization pipeline
"""

from .engine import ContentBuffer
from .models import NormalizationContext, NormalizeOp, StripOp
from .service import NORMALIZE_STEPS, PRE_TITLE_STEPS, STRIP_STEPS, ContentNormalizer

__all__ = [
    "ContentBuffer",
    "ContentNormalizer",
    "NormalizationContext",
    "NormalizeOp",
    "StripOp",
    "PRE_TITLE_STEPS",
    "NORMALIZE_STEPS",
    "STRIP_STEPS",
]
