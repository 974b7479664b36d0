"""License document with lazily computed normalized forms.

A Document wraps one immutable piece of raw text. Every derived value is
computed on first access and cached for the document's lifetime; the raw
content never changes, so nothing is ever invalidated.
"""

import threading
from typing import Callable, Dict, FrozenSet, List, Optional, TypeVar

from licensetext.logging import get_logger, log_context
from licensetext.matching.engine import length_delta as score_length_delta
from licensetext.matching.engine import similarity as score_similarity
from licensetext.matching.wordsets import extract_fields, remove_fields, tokenize
from licensetext.normalization import ContentNormalizer, NormalizationContext
from licensetext.utils.hashing import fingerprint
from licensetext.utils.wrapping import wrap

logger = get_logger(__name__, component="normalization")

T = TypeVar("T")


class Document:
    """A license text to normalize and compare.

    Args:
        raw_content: Raw text; None is treated as empty
        filename: Optional source filename; HTML sources are converted first
        context: Collaborators and settings (defaults to NormalizationContext.default())

    Example:
        >>> doc = Document("MIT License\\n\\nPermission is hereby granted...")
        >>> doc.normalized_content()
        'permission is hereby granted...'
    """

    def __init__(
        self,
        raw_content: Optional[str],
        filename: Optional[str] = None,
        context: Optional[NormalizationContext] = None,
    ):
        self._raw_content = raw_content
        self.filename = filename
        self.context = context or NormalizationContext.default()
        self._cache: Dict[str, object] = {}
        # Reentrant: normalized_content() computes pre_title_content() under the lock
        self._lock = threading.RLock()

    @property
    def raw_content(self) -> Optional[str]:
        return self._raw_content

    def _memoize(self, key: str, compute: Callable[[], T]) -> T:
        if key in self._cache:
            return self._cache[key]
        with self._lock:
            if key not in self._cache:
                self._cache[key] = compute()
            return self._cache[key]

    def pre_title_content(self) -> str:
        """Content with structure, title and version removed, original case kept."""
        return self._memoize("pre_title_content", self._compute_pre_title_content)

    def normalized_content(self) -> str:
        """Canonical lowercase content used for hashing and comparison."""
        return self._memoize("normalized_content", self._compute_normalized_content)

    def wrapped_content(self, width: Optional[int] = None) -> Optional[str]:
        """Normalized content wrapped for display (not cached)."""
        return wrap(self.normalized_content(), width or self.context.settings.wrap_width)

    def content_length(self) -> int:
        """Number of characters in the normalized content."""
        return len(self.normalized_content())

    def fingerprint(self) -> str:
        """SHA-1 hex digest of the normalized content."""
        return self._memoize("fingerprint", lambda: fingerprint(self.normalized_content()))

    def word_set(self) -> FrozenSet[str]:
        """Distinct tokens of the normalized content."""
        return self._memoize("word_set", lambda: tokenize(self.normalized_content()))

    def fields(self) -> List[str]:
        """Field placeholder occurrences in the normalized content, in order."""
        return self._memoize(
            "fields",
            lambda: extract_fields(self.normalized_content(), self.context.field_grammar),
        )

    def field_set(self) -> FrozenSet[str]:
        """Distinct field placeholders in the normalized content."""
        return self._memoize("field_set", lambda: frozenset(self.fields()))

    def fieldless_word_set(self) -> FrozenSet[str]:
        """Word set without the tokens of any field."""
        return self._memoize(
            "fieldless_word_set", lambda: remove_fields(self.word_set(), self.field_set())
        )

    def length_delta(self, other: "Document") -> int:
        """Absolute difference in normalized length from another document."""
        return score_length_delta(self, other)

    def similarity(self, other: "Document") -> float:
        """Similarity of another document to this one, as a percentage."""
        return score_similarity(self, other)

    def _compute_pre_title_content(self) -> str:
        normalizer = ContentNormalizer(self.context)
        with log_context(document=self.filename or "<inline>"):
            return normalizer.strip_title_and_version(self._raw_content, self.filename)

    def _compute_normalized_content(self) -> str:
        pre_title = self.pre_title_content()
        normalizer = ContentNormalizer(self.context)
        with log_context(document=self.filename or "<inline>"):
            normalized = normalizer.normalize(pre_title)
            logger.debug(
                "Normalized license content",
                extra={
                    "event": "normalization.document.normalized",
                    "raw_length": len(self._raw_content or ""),
                    "normalized_length": len(normalized),
                },
            )
        return normalized

    def __repr__(self) -> str:
        source = self.filename or "<inline>"
        return f"Document(source={source!r}, raw_length={len(self._raw_content or '')})"
