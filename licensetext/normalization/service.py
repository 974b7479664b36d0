"""Normalization pipeline turning raw license text into canonical content.

The pipeline runs in two phases:
1. Pre-title: strip structural noise (HTML, rules, comment leaders, headings,
   title, version) while preserving case, for callers that detect
   attribution lines in the original casing
2. Normalized: lowercase, unify punctuation and spelling, strip remaining
   markup and boilerplate, collapse whitespace

Step order is significant: several steps only apply once an earlier one has
removed what was in the way.
"""

import logging
from typing import Optional, Tuple

from licensetext.logging import get_logger

from .engine import ContentBuffer
from .models import NormalizationContext, NormalizeOp, StripOp

logger = get_logger(__name__, component="normalization")

PRE_TITLE_STEPS: Tuple[StripOp, ...] = (
    StripOp.HTML,
    StripOp.HRS,
    StripOp.COMMENTS,
    StripOp.MARKDOWN_HEADINGS,
    StripOp.TITLE,
    StripOp.VERSION,
)

NORMALIZE_STEPS: Tuple[NormalizeOp, ...] = (
    NormalizeOp.LISTS,
    NormalizeOp.HTTPS,
    NormalizeOp.AMPERSANDS,
    NormalizeOp.DASHES,
    NormalizeOp.QUOTES,
    NormalizeOp.SPELLING,
    NormalizeOp.BULLETS,
)

STRIP_STEPS: Tuple[StripOp, ...] = (
    StripOp.CC0_OPTIONAL,
    StripOp.UNLICENSE_OPTIONAL,
    StripOp.HRS,
    StripOp.MARKDOWN_HEADINGS,
    StripOp.BORDERS,
    StripOp.TITLE,
    StripOp.VERSION,
    StripOp.URL,
    StripOp.COPYRIGHT,
    # Removing the copyright can expose another title
    StripOp.TITLE,
    StripOp.BLOCK_MARKUP,
    StripOp.SPAN_MARKUP,
    StripOp.LINK_MARKUP,
    StripOp.DEVELOPED_BY,
    StripOp.END_OF_TERMS,
    StripOp.WHITESPACE,
    StripOp.MIT_OPTIONAL,
)


class ContentNormalizer:
    """Runs the fixed normalization pipeline.

    Args:
        context: Collaborators and settings (defaults to NormalizationContext.default())
        logger_instance: Logger instance (defaults to module logger)
    """

    def __init__(
        self,
        context: Optional[NormalizationContext] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.context = context or NormalizationContext.default()
        self.logger = logger_instance or logger

    def strip_title_and_version(self, raw_content: Optional[str], filename: Optional[str] = None) -> str:
        """Phase 1: content with structure, title and version removed, case preserved.

        Args:
            raw_content: Raw license text (None is treated as empty)
            filename: Optional source filename; HTML sources are converted first

        Returns:
            Pre-title content
        """
        buffer = self._buffer(raw_content, filename)
        for step in PRE_TITLE_STEPS:
            buffer.strip(step)
        return buffer.content

    def normalize(self, pre_title_content: str) -> str:
        """Phase 2: canonical normalized content from pre-title content.

        Args:
            pre_title_content: Output of strip_title_and_version()

        Returns:
            Lowercase, single-line normalized content
        """
        buffer = self._buffer(pre_title_content.lower())
        for op in NORMALIZE_STEPS:
            buffer.normalize(op)
        for step in STRIP_STEPS:
            buffer.strip(step)
        return buffer.content

    def run(self, raw_content: Optional[str], filename: Optional[str] = None) -> str:
        """Both phases in one call, for callers that do not need the checkpoint."""
        return self.normalize(self.strip_title_and_version(raw_content, filename))

    def _buffer(self, content: Optional[str], filename: Optional[str] = None) -> ContentBuffer:
        return ContentBuffer(content, self.context, filename=filename, logger_instance=self.logger)
