"""Static rule tables for license content normalization.

Three tables, all built once at import and never mutated:

* REGEXES: named patterns stripped (or unwrapped) from license content.
* NORMALIZATIONS: ordered (pattern, replacement) substitutions that unify
  punctuation and markup variance.
* VARIETAL_WORDS: spelling and terminology variants that are legally
  equivalent, mapped to the preferred form
  (see https://spdx.org/spdx-license-list/matching-guidelines).
"""

import re
from types import MappingProxyType
from typing import Mapping, NamedTuple, Pattern

# Line-oriented patterns: ^ and $ always anchor at line boundaries
_I = re.IGNORECASE
_M = re.MULTILINE
_S = re.DOTALL

START = r"\A\s*"

END_OF_TERMS_REGEX = re.compile(r"^[\s#*_]*end of terms and conditions[\s#*_]*$", _I | _M)

REGEXES: Mapping[str, Pattern[str]] = MappingProxyType({
    "hrs": re.compile(r"^\s*[=\-*]{3,}\s*$", _M),
    "all_rights_reserved": re.compile(START + r"all rights reserved\.?$", _I | _M),
    "whitespace": re.compile(r"\s+"),
    "markdown_headings": re.compile(START + r"#+"),
    "version": re.compile(START + r"version.*$", _I | _M),
    "span_markup": re.compile(r"[_*~]+(.*?)[_*~]+"),
    "link_markup": re.compile(r"\[(.+?)\]\(.+?\)"),
    "block_markup": re.compile(r"^\s*>", _M),
    "border_markup": re.compile(r"^[*-](.*?)[*-]$", _M),
    "comment_markup": re.compile(r"^\s*?[/*]{1,2}", _M),
    "url": re.compile(START + r"https?://[^ ]+\n"),
    "bullet": re.compile(r"\n\n\s*(?:[*-]|\(?[\da-z]{1,2}[).])\s+", _I),
    "developed_by": re.compile(START + r"developed by:.*?\n\n", _I | _S),
    "quote_begin": re.compile(r"[`'\"‘“]"),
    "quote_end": re.compile(r"[`'\"’”]"),
    "cc_legal_code": re.compile(r"^\s*Creative Commons Legal Code\s*$", _I | _M),
    "cc0_info": re.compile(r"For more information, please see\s*\S+zero\S+", _I | _S),
    "cc0_disclaimer": re.compile(r"CREATIVE COMMONS CORPORATION.*?\n\n", _I | _S),
    "unlicense_info": re.compile(r"For more information, please.*\S+unlicense\S+", _I | _S),
    "mit_optional": re.compile(r"\(including the next paragraph\)", _I),
})


class Substitution(NamedTuple):
    """A declarative find-and-replace rule."""

    pattern: Pattern[str]
    replacement: str


# Applied in insertion order
NORMALIZATIONS: Mapping[str, Substitution] = MappingProxyType({
    "lists": Substitution(re.compile(r"^\s*(?:\d\.|\*)\s+([^\n])", _M), r"- \1"),
    "https": Substitution(re.compile(r"http:"), "https:"),
    "ampersands": Substitution(re.compile(r"&"), "and"),
    "dashes": Substitution(re.compile(r"(?<!^)([—–-]+)(?!$)", _M), "-"),
    "quotes": Substitution(
        re.compile(
            REGEXES["quote_begin"].pattern + r"+([\w -]*?\w)" + REGEXES["quote_end"].pattern + "+"
        ),
        r'"\1"',
    ),
})

VARIETAL_WORDS: Mapping[str, str] = MappingProxyType({
    "acknowledgment": "acknowledgement",
    "analogue": "analog",
    "analyse": "analyze",
    "artefact": "artifact",
    "authorisation": "authorization",
    "authorised": "authorized",
    "calibre": "caliber",
    "cancelled": "canceled",
    "capitalisations": "capitalizations",
    "catalogue": "catalog",
    "categorise": "categorize",
    "centre": "center",
    "emphasised": "emphasized",
    "favour": "favor",
    "favourite": "favorite",
    "fulfil": "fulfill",
    "fulfilment": "fulfillment",
    "initialise": "initialize",
    "judgment": "judgement",
    "labelling": "labeling",
    "labour": "labor",
    "licence": "license",
    "maximise": "maximize",
    "modelled": "modeled",
    "modelling": "modeling",
    "offence": "offense",
    "optimise": "optimize",
    "organisation": "organization",
    "organise": "organize",
    "practise": "practice",
    "programme": "program",
    "realise": "realize",
    "recognise": "recognize",
    "signalling": "signaling",
    "sub-license": "sublicense",
    "sub license": "sublicense",
    "utilisation": "utilization",
    "whilst": "while",
    "wilful": "wilfull",
    "non-commercial": "noncommercial",
    "cent": "percent",
    "owner": "holder",
})

VARIETAL_WORDS_REGEX = re.compile(
    r"\b(?:" + "|".join(re.escape(word) for word in VARIETAL_WORDS) + r")\b"
)

# Strip squeezes runs of spaces only; newlines survive until the whitespace step
SPACE_RUNS_REGEX = re.compile(r" {2,}")

# Bullets separated by blank lines, and ") (" between enumerators
BULLET_REPLACEMENT = "\n\n* "
ADJACENT_PARENS_REGEX = re.compile(r"\)\s+\(")


def union(*patterns: Pattern[str], flags: int = _I | _M) -> Pattern[str]:
    """Combine compiled patterns into a single alternation.

    Args:
        *patterns: Patterns to join; their own flags are replaced by ``flags``
        flags: Flags for the combined pattern

    Returns:
        Compiled pattern matching any of the inputs, or nothing if empty
    """
    if not patterns:
        return re.compile(r"(?!)")
    return re.compile("|".join(f"(?:{p.pattern})" for p in patterns), flags)
