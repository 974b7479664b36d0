"""License registry: known titles and the field grammar used by normalization.

This module provides:
- LicenseEntry: One known license (title, key, derived title pattern)
- StaticLicenseRegistry: In-memory registry over a fixed list of entries
- load_registry / bundled_registry: YAML-backed registries
- TitleMatcher: Lazily built title alternation, shared process-wide
- FieldGrammar: Recognition of substitutable placeholders such as [year]
"""

from .fields import DEFAULT_FIELD_GRAMMAR, LICENSE_FIELDS, BracketFieldGrammar, FieldGrammar
from .loader import bundled_registry, load_registry
from .models import LicenseEntry, LicenseRegistry, StaticLicenseRegistry, derive_title_pattern
from .titles import (
    TitleMatcher,
    configure_title_matcher,
    get_title_matcher,
    reset_title_matcher,
)

__all__ = [
    "FieldGrammar",
    "BracketFieldGrammar",
    "DEFAULT_FIELD_GRAMMAR",
    "LICENSE_FIELDS",
    "LicenseEntry",
    "LicenseRegistry",
    "StaticLicenseRegistry",
    "derive_title_pattern",
    "load_registry",
    "bundled_registry",
    "TitleMatcher",
    "configure_title_matcher",
    "get_title_matcher",
    "reset_title_matcher",
]
