"""Transformation engine: strip and normalize steps over a text buffer.

Most steps are declarative (a pattern from the rule tables). Steps whose
control flow is irregular (conditional, repeat-until-no-match, truncation)
are specialized procedures, selected through a closed StripOp/NormalizeOp
table rather than by name lookup on the instance.
"""

import logging
import re
from typing import Callable, Dict, Mapping, Optional, Pattern, Union

from licensetext.config.exceptions import UnknownRuleError
from licensetext.logging import get_logger

from . import rules
from .html import html_to_markdown
from .models import NormalizationContext, NormalizeOp, StripOp

logger = get_logger(__name__, component="normalization")

StripRule = Union[StripOp, str, Pattern[str]]
NormalizeRule = Union[NormalizeOp, str, Pattern[str]]
Replacement = Union[str, Mapping[str, str]]


class ContentBuffer:
    """Mutable working copy of a document's content.

    Args:
        content: Starting text; None is treated as empty. Leading and trailing
            whitespace is trimmed.
        context: Collaborators and settings for title/copyright matching
        filename: Source filename, used only to decide on the HTML pre-pass
        logger_instance: Logger instance (defaults to module logger)
    """

    def __init__(
        self,
        content: Optional[str],
        context: Optional[NormalizationContext] = None,
        filename: Optional[str] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        self.content = (content or "").strip()
        self.context = context or NormalizationContext.default()
        self.filename = filename
        self.logger = logger_instance or logger

    def strip(self, rule: StripRule) -> None:
        """Replace every match of a rule with a space, then squeeze and trim.

        Args:
            rule: StripOp member, rule name, or compiled pattern

        Raises:
            UnknownRuleError: If a name matches neither a procedure nor a rule
        """
        if isinstance(rule, (StripOp, str)):
            op = _coerce(StripOp, rule)
            if op in self._STRIP_PROCEDURES:
                self._STRIP_PROCEDURES[op](self)
                return
            name = op.value if op else rule
            if name not in rules.REGEXES:
                raise UnknownRuleError(
                    name, "strip", set(rules.REGEXES) | {o.value for o in self._STRIP_PROCEDURES}
                )
            rule = rules.REGEXES[name]

        self._blank(rule)

    def normalize(self, rule: NormalizeRule, replacement: Optional[Replacement] = None) -> None:
        """Replace every match of a rule.

        With an explicit replacement, ``rule`` must be a pattern (or pattern
        source) and ``replacement`` is either a template with ``\\1``-style
        back-references or a mapping from matched text to its replacement
        (unmapped matches are removed).
        Without one, ``rule`` names a NormalizeOp.

        Raises:
            UnknownRuleError: If a name matches neither a substitution nor a procedure
        """
        if replacement is not None:
            self._substitute(_compile(rule), replacement)
            return

        op = _coerce(NormalizeOp, rule)
        if op is not None and op.value in rules.NORMALIZATIONS:
            substitution = rules.NORMALIZATIONS[op.value]
            self._substitute(substitution.pattern, substitution.replacement)
        elif op in self._NORMALIZE_PROCEDURES:
            self._NORMALIZE_PROCEDURES[op](self)
        else:
            name = rule.value if isinstance(rule, NormalizeOp) else str(rule)
            raise UnknownRuleError(name, "normalize", {o.value for o in NormalizeOp})

    def matches(self, pattern: Pattern[str]) -> bool:
        """Whether a pattern matches anywhere in the current content."""
        return pattern.search(self.content) is not None

    def _blank(self, pattern: Pattern[str]) -> None:
        text = pattern.sub(" ", self.content)
        self.content = rules.SPACE_RUNS_REGEX.sub(" ", text).strip()

    def _substitute(self, pattern: Pattern[str], replacement: Replacement) -> None:
        if isinstance(replacement, str):
            self.content = pattern.sub(replacement, self.content)
        else:
            self.content = pattern.sub(lambda m: replacement.get(m.group(0), ""), self.content)

    def _strip_until_clean(self, pattern: Pattern[str], step: StripOp) -> None:
        """Strip a pattern repeatedly until it no longer matches."""
        max_passes = self.context.settings.max_strip_passes
        passes = 0
        while self.matches(pattern):
            if passes >= max_passes:
                self.logger.warning(
                    f"Gave up stripping {step.value} after {passes} passes",
                    extra={
                        "event": "normalization.strip.fixpoint_limit",
                        "step": step.value,
                        "passes": passes,
                    },
                )
                return
            self._blank(pattern)
            passes += 1

        if passes:
            self.logger.debug(
                f"Stripped {step.value} in {passes} passes",
                extra={"event": f"normalization.strip.{step.value}", "passes": passes},
            )

    # Specialized strip procedures

    def _strip_html(self) -> None:
        if not self.filename or not self.context.settings.is_html_source(self.filename):
            return
        self.content = html_to_markdown(self.content)

    def _strip_title(self) -> None:
        # Titles may repeat, e.g. "MIT License\n\nThe MIT License"
        self._strip_until_clean(self.context.title_pattern, StripOp.TITLE)

    def _strip_copyright(self) -> None:
        pattern = rules.union(self.context.copyright_pattern, rules.REGEXES["all_rights_reserved"])
        self._strip_until_clean(pattern, StripOp.COPYRIGHT)

    def _strip_comments(self) -> None:
        lines = self.content.split("\n")
        if len(lines) == 1:
            return
        comment = rules.REGEXES["comment_markup"]
        if not all(comment.match(line) for line in lines):
            return
        self._blank(comment)

    def _strip_end_of_terms(self) -> None:
        match = rules.END_OF_TERMS_REGEX.search(self.content)
        if match:
            self.content = self.content[: match.start()]

    def _strip_cc0_optional(self) -> None:
        if "associating cc0" not in self.content.lower():
            return
        self._blank(rules.REGEXES["cc_legal_code"])
        self._blank(rules.REGEXES["cc0_info"])
        self._blank(rules.REGEXES["cc0_disclaimer"])

    def _strip_unlicense_optional(self) -> None:
        if "unlicense" not in self.content.lower():
            return
        self._blank(rules.REGEXES["unlicense_info"])

    def _strip_borders(self) -> None:
        self._substitute(rules.REGEXES["border_markup"], r"\1")

    def _strip_span_markup(self) -> None:
        self._substitute(rules.REGEXES["span_markup"], r"\1")

    def _strip_link_markup(self) -> None:
        self._substitute(rules.REGEXES["link_markup"], r"\1")

    # Specialized normalize procedures

    def _normalize_spelling(self) -> None:
        self._substitute(rules.VARIETAL_WORDS_REGEX, rules.VARIETAL_WORDS)

    def _normalize_bullets(self) -> None:
        self._substitute(rules.REGEXES["bullet"], rules.BULLET_REPLACEMENT)
        self._substitute(rules.ADJACENT_PARENS_REGEX, ")(")

    _STRIP_PROCEDURES: Dict[StripOp, Callable[["ContentBuffer"], None]] = {
        StripOp.HTML: _strip_html,
        StripOp.TITLE: _strip_title,
        StripOp.COPYRIGHT: _strip_copyright,
        StripOp.COMMENTS: _strip_comments,
        StripOp.END_OF_TERMS: _strip_end_of_terms,
        StripOp.CC0_OPTIONAL: _strip_cc0_optional,
        StripOp.UNLICENSE_OPTIONAL: _strip_unlicense_optional,
        StripOp.BORDERS: _strip_borders,
        StripOp.SPAN_MARKUP: _strip_span_markup,
        StripOp.LINK_MARKUP: _strip_link_markup,
    }

    _NORMALIZE_PROCEDURES: Dict[NormalizeOp, Callable[["ContentBuffer"], None]] = {
        NormalizeOp.SPELLING: _normalize_spelling,
        NormalizeOp.BULLETS: _normalize_bullets,
    }


def _coerce(enum_cls, value):
    """Return the enum member for a value, or None when it names no member."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _compile(rule) -> Pattern[str]:
    if isinstance(rule, (StripOp, NormalizeOp)):
        raise TypeError(f"Expected a pattern, got step {rule.value!r}")
    if isinstance(rule, str):
        return re.compile(rule)
    return rule
