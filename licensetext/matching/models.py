"""Data models for similarity scoring."""

from dataclasses import dataclass
from typing import AbstractSet, Protocol

from licensetext.utils.wrapping import format_percent


class Comparable(Protocol):
    """What the scorer needs from a document."""

    def word_set(self) -> AbstractSet[str]:
        ...

    def fieldless_word_set(self) -> AbstractSet[str]:
        ...

    def field_set(self) -> AbstractSet[str]:
        ...

    def content_length(self) -> int:
        ...


@dataclass(frozen=True)
class SimilarityResult:
    """Breakdown of a similarity score between two documents.

    Attributes:
        overlap: Words shared by the left document (fields removed) and the right
        total: Combined word-set size, less the left document's field count
        length_delta: Absolute difference in normalized length
        adjusted_length_delta: Length delta after field allowance
        score: Final percentage (100.0 for identical field-free documents)
    """

    overlap: int
    total: int
    length_delta: int
    adjusted_length_delta: int
    score: float

    @property
    def percent(self) -> str:
        """Score formatted for display, e.g. '97.12%'."""
        return format_percent(self.score)
