"""License registry models.

A registry supplies, for every known license, a title, a version-aware title
pattern and a name without its version. The normalizer only needs these to
build the title matcher; everything else about a license lives elsewhere.
"""

import re
from typing import Dict, Iterable, List, Optional, Protocol

from pydantic import BaseModel, Field, field_validator, model_validator

_VERSION_WORD = re.compile(r"v?(\d+)\.(\d+)")
_NAME_WITHOUT_VERSION = re.compile(r"(.+?)(?:(?: v?\d\.\d)|$)")
_VERSION_SEPARATOR = r",?\s+(?:version\s+|v\.?\s*)?"
# Flag groups such as "(?i)" that apply to the whole expression
_INLINE_GLOBAL_FLAGS = re.compile(r"(?<!\\)\(\?[aiLmsux]+\)")


def derive_title_pattern(title: str, key: str) -> str:
    """Build a lenient, case-insensitive title pattern for a license.

    The title part tolerates a missing "license"/"licence" word, a missing
    leading "GNU", and the common ways of writing a version
    ("2.0", "v2.0", "Version 2", ", version 2.0"). The key part lets the
    SPDX-style key match with either hyphens or spaces.

    Args:
        title: Human-readable license title, e.g. "GNU General Public License v3.0"
        key: Short identifier, e.g. "gpl-3.0"

    Returns:
        Pattern string without inline flags
    """
    text = title.lower().replace("*", "u", 1)
    text = re.sub(r"\Athe\s+", "", text)
    text = re.sub(r",?\s+version\s+", " ", text, count=1)

    pattern = ""
    glue = False
    for word in text.split():
        version = _VERSION_WORD.fullmatch(word)
        if word in ("license", "licence"):
            pattern += r"(?:\s+licen[sc]e)?"
        elif version:
            major, minor = version.groups()
            minor_part = r"(?:\.0)?" if minor == "0" else r"\." + minor
            pattern += _VERSION_SEPARATOR + major + minor_part
        elif word == "gnu":
            pattern += (r"\s+" if pattern else "") + r"(?:gnu\s+)?"
            glue = True
            continue
        else:
            if pattern and not glue:
                pattern += r"\s+"
            pattern += re.escape(word)
        glue = False

    key_pattern = r"[- ]".join(re.escape(part) for part in key.lower().split("-"))
    key_pattern += r"(?:\s+licen[sc]e)?"

    return f"(?:{pattern})|(?:{key_pattern})"


class LicenseEntry(BaseModel):
    """One license known to the registry."""

    key: str = Field(..., min_length=1, description="Short identifier, e.g. 'mit'")
    title: str = Field(..., min_length=1, description="Human-readable license title")
    name: Optional[str] = Field(None, description="Display name (defaults to title)")
    title_pattern: Optional[str] = Field(
        None, description="Flag-free regex matching the title (derived when omitted)"
    )
    hidden: bool = Field(False, description="Excluded from default listings")
    pseudo: bool = Field(False, description="Placeholder such as 'other' or 'no-license'")

    @field_validator("key")
    @classmethod
    def normalize_key(cls, v: str) -> str:
        """Lowercase and strip the key."""
        stripped = v.strip().lower()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Strip whitespace from the title."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped

    @field_validator("title_pattern")
    @classmethod
    def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Reject patterns that do not compile inside a larger alternation."""
        if v is None:
            return None
        if _INLINE_GLOBAL_FLAGS.search(v):
            raise ValueError("Invalid title pattern: inline global flags are not supported")
        try:
            re.compile(f"(?:{v})")
        except re.error as e:
            raise ValueError(f"Invalid title pattern: {e}") from e
        return v

    @model_validator(mode="after")
    def fill_derived_fields(self):
        """Default the name to the title and derive a missing title pattern."""
        if not self.name:
            self.name = self.title
        if self.title_pattern is None:
            self.title_pattern = derive_title_pattern(self.name, self.key)
        return self

    @property
    def name_without_version(self) -> str:
        """Display name with any trailing ' 2.0' / ' v3.0' style version removed."""
        return _NAME_WITHOUT_VERSION.match(self.name).group(1)


class LicenseRegistry(Protocol):
    """Source of license titles for the title matcher."""

    def all(self, include_hidden: bool = False, include_pseudo: bool = True) -> List[LicenseEntry]:
        ...


class StaticLicenseRegistry:
    """In-memory registry over a fixed list of entries."""

    def __init__(self, entries: Iterable[LicenseEntry]):
        self._entries: Dict[str, LicenseEntry] = {}
        for entry in entries:
            self._entries[entry.key] = entry

    def all(self, include_hidden: bool = False, include_pseudo: bool = True) -> List[LicenseEntry]:
        """List entries, optionally including hidden and pseudo licenses.

        Args:
            include_hidden: Include entries flagged hidden
            include_pseudo: Include placeholder entries such as 'other'

        Returns:
            Entries sorted by key
        """
        return [
            entry
            for key, entry in sorted(self._entries.items())
            if (include_hidden or not entry.hidden) and (include_pseudo or not entry.pseudo)
        ]

    def find(self, key: str) -> Optional[LicenseEntry]:
        """Look up an entry by key (case-insensitive)."""
        return self._entries.get(key.strip().lower())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.find(key) is not None
