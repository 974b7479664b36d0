"""Similarity scoring between normalized license documents.

The score is a Dice-style word overlap (200 * shared / combined) whose
denominator grows by a tenth of the length difference, so a short excerpt
that happens to share words with a long license is pushed down.
"""

import logging
from typing import Optional

from licensetext.logging import get_logger

from .models import Comparable, SimilarityResult

logger = get_logger(__name__, component="matching")

# Characters of length variance each substitutable field may absorb
FIELD_LENGTH_ALLOWANCE = 2


def length_delta(a: Comparable, b: Comparable) -> int:
    """Absolute difference in normalized content length."""
    return abs(a.content_length() - b.content_length())


def fields_adjusted_length_delta(a: Comparable, b: Comparable) -> int:
    """Length delta less an allowance per field in ``a``.

    Once the allowance would bring the delta to zero or below, the raw delta
    is used instead.
    """
    delta = length_delta(a, b)
    adjusted = delta - len(a.field_set()) * FIELD_LENGTH_ALLOWANCE
    return adjusted if adjusted > 0 else delta


class SimilarityScorer:
    """Scores how closely one document matches another.

    The comparison is deliberately one-sided: fields are removed from the
    left document's words only, so ``a`` is normally the known license
    template and ``b`` the candidate text.
    """

    def __init__(self, logger_instance: Optional[logging.Logger] = None):
        self.logger = logger_instance or logger

    def evaluate(self, a: Comparable, b: Comparable) -> SimilarityResult:
        """Score ``b`` against ``a``.

        Args:
            a: Reference document (its fields are ignored)
            b: Candidate document

        Returns:
            SimilarityResult; the score is 0.0 when there is nothing to compare
        """
        left = a.fieldless_word_set()
        right = b.word_set()

        overlap = len(left & right)
        total = len(left) + len(right) - len(a.field_set())
        delta = length_delta(a, b)
        adjusted = fields_adjusted_length_delta(a, b)

        denominator = total + adjusted / 10.0
        score = overlap * 200.0 / denominator if denominator else 0.0

        self.logger.debug(
            f"Scored similarity {score:.2f}",
            extra={
                "event": "matching.similarity.scored",
                "overlap": overlap,
                "total": total,
                "length_delta": delta,
                "score": round(score, 2),
            },
        )

        return SimilarityResult(
            overlap=overlap,
            total=total,
            length_delta=delta,
            adjusted_length_delta=adjusted,
            score=score,
        )


_default_scorer = SimilarityScorer()


def similarity(a: Comparable, b: Comparable) -> float:
    """Similarity of ``b`` to ``a`` as a percentage.

    Not symmetric; see SimilarityScorer.
    """
    return _default_scorer.evaluate(a, b).score
