"""Data models for the normalization layer.

This module defines the enums naming every strip and normalize step, and the
immutable context that carries collaborators into a normalization run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Pattern

from licensetext.config.models import NormalizerSettings
from licensetext.registry.fields import DEFAULT_FIELD_GRAMMAR, FieldGrammar
from licensetext.registry.titles import TitleMatcher, get_title_matcher

from .copyright import COPYRIGHT_PATTERN


class StripOp(str, Enum):
    """Named strip steps.

    Values double as rule names: steps without a specialized procedure are
    looked up in the REGEXES table under the same name.
    """

    HTML = "html"
    HRS = "hrs"
    COMMENTS = "comments"
    MARKDOWN_HEADINGS = "markdown_headings"
    TITLE = "title"
    VERSION = "version"
    CC0_OPTIONAL = "cc0_optional"
    UNLICENSE_OPTIONAL = "unlicense_optional"
    BORDERS = "borders"
    URL = "url"
    COPYRIGHT = "copyright"
    BLOCK_MARKUP = "block_markup"
    SPAN_MARKUP = "span_markup"
    LINK_MARKUP = "link_markup"
    DEVELOPED_BY = "developed_by"
    END_OF_TERMS = "end_of_terms"
    WHITESPACE = "whitespace"
    MIT_OPTIONAL = "mit_optional"


class NormalizeOp(str, Enum):
    """Named normalize steps; the first five are declarative substitutions."""

    LISTS = "lists"
    HTTPS = "https"
    AMPERSANDS = "ampersands"
    DASHES = "dashes"
    QUOTES = "quotes"
    SPELLING = "spelling"
    BULLETS = "bullets"


@dataclass(frozen=True)
class NormalizationContext:
    """Immutable collaborators and settings for normalizing documents.

    Attributes:
        settings: Runtime settings (HTML extensions, fixpoint bound, wrap width)
        title_matcher: Matcher recognising license titles; the shared one if None
        copyright_pattern: Pattern for leading copyright notices
        field_grammar: Grammar recognising substitutable fields
    """

    settings: NormalizerSettings = field(default_factory=NormalizerSettings)
    title_matcher: Optional[TitleMatcher] = None
    copyright_pattern: Pattern[str] = COPYRIGHT_PATTERN
    field_grammar: FieldGrammar = DEFAULT_FIELD_GRAMMAR

    @classmethod
    def default(cls) -> "NormalizationContext":
        """Context with default settings and the process-wide title matcher."""
        return cls()

    @property
    def title_pattern(self) -> Pattern[str]:
        """Compiled title pattern, resolving the shared matcher on demand."""
        matcher = self.title_matcher or get_title_matcher()
        return matcher.pattern
