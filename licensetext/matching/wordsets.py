"""Word-set and field extraction over normalized content."""

import re
from typing import FrozenSet, Iterable, List

from licensetext.registry.fields import FieldGrammar

# Runs of word characters and slashes, keeping a possessive "'s" or a
# trailing apostrophe after "s"
WORD_REGEX = re.compile(r"(?:[\w/](?:'s|(?<=s)')?)+")


def tokenize(text: str) -> FrozenSet[str]:
    """Distinct tokens in a text.

    Example:
        >>> sorted(tokenize("the licensor's rights and/or the authors' rights"))
        ['and/or', "authors'", "licensor's", 'rights', 'the']
    """
    return frozenset(WORD_REGEX.findall(text or ""))


def extract_fields(text: str, grammar: FieldGrammar) -> List[str]:
    """Every field placeholder occurrence in a text, in document order.

    When the grammar's pattern has exactly one capture group the group is
    returned, otherwise the whole match.
    """
    if not text:
        return []
    return [
        match.group(1) if grammar.pattern.groups == 1 else match.group(0)
        for match in grammar.pattern.finditer(text)
    ]


def remove_fields(words: FrozenSet[str], fields: Iterable[str]) -> FrozenSet[str]:
    """Word set with every token of every field removed."""
    field_tokens = set()
    for field in fields:
        field_tokens |= tokenize(field)
    return words - field_tokens
