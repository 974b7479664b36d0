"""Substitutable field grammar.

Fields are placeholders in a license template (``[year]``, ``[fullname]``)
that a user replaces when applying the license. They are excluded from
strict identity comparison.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Pattern, Protocol


class FieldGrammar(Protocol):
    """Anything exposing a compiled pattern that finds field placeholders.

    When the pattern has exactly one capture group, the group is taken as the
    field; otherwise the whole match is.
    """

    pattern: Pattern[str]


LICENSE_FIELDS: Mapping[str, str] = MappingProxyType({
    "fullname": "The full name or username of the repository owner",
    "login": "The repository owner's username",
    "email": "The repository owner's primary email address",
    "project": "The repository name",
    "description": "The description of the repository",
    "year": "The current year",
    "projecturl": "The repository URL or other project website",
})


@dataclass(frozen=True)
class BracketFieldGrammar:
    """Field grammar for ``[name]`` placeholders drawn from a fixed key list."""

    pattern: Pattern[str]

    @classmethod
    def for_fields(cls, names) -> "BracketFieldGrammar":
        alternation = "|".join(re.escape(name) for name in names)
        return cls(re.compile(r"\[(" + alternation + r")\]"))


DEFAULT_FIELD_GRAMMAR = BracketFieldGrammar.for_fields(LICENSE_FIELDS)
