"""Title matcher built from a license registry.

The matcher compiles every known title into one alternation anchored at the
start of the content. Building it walks the whole registry, so it is built
once per matcher and shared; a process-wide instance is available through
get_title_matcher().
"""

import re
import threading
from typing import Optional, Pattern

from licensetext.logging import get_logger

from .models import LicenseRegistry

logger = get_logger(__name__, component="registry")


class TitleMatcher:
    """Lazily compiled pattern matching any known license title.

    Args:
        registry: Registry queried (once) for hidden and non-pseudo licenses
    """

    def __init__(self, registry: LicenseRegistry):
        self.registry = registry
        self._pattern: Optional[Pattern[str]] = None
        self._lock = threading.Lock()

    @property
    def pattern(self) -> Pattern[str]:
        """The compiled title pattern, built on first access."""
        if self._pattern is None:
            with self._lock:
                if self._pattern is None:
                    self._pattern = self._build()
        return self._pattern

    def _build(self) -> Pattern[str]:
        licenses = self.registry.all(include_hidden=True, include_pseudo=False)
        alternatives = [entry.title_pattern for entry in licenses]

        # Title patterns include the version so families stay distinct; for
        # stripping, the bare name is good enough
        alternatives.extend(
            re.escape(entry.name_without_version)
            for entry in licenses
            if entry.title != entry.name_without_version
        )

        if alternatives:
            union = "|".join(f"(?:{alt})" for alt in alternatives)
        else:
            union = r"(?!)"

        pattern = re.compile(
            r"\A\s*\(?(?:the )?(?:" + union + r").*?$", re.IGNORECASE | re.MULTILINE
        )

        logger.debug(
            "Built license title matcher",
            extra={
                "event": "title_matcher.built",
                "license_count": len(licenses),
                "alternative_count": len(alternatives),
            },
        )
        return pattern


_shared_matcher: Optional[TitleMatcher] = None
_shared_lock = threading.Lock()


def configure_title_matcher(registry: LicenseRegistry) -> TitleMatcher:
    """Install the process-wide title matcher for a registry.

    Call once at startup to substitute a registry other than the bundled one.

    Args:
        registry: Registry the shared matcher is built from

    Returns:
        The newly installed matcher
    """
    global _shared_matcher
    with _shared_lock:
        _shared_matcher = TitleMatcher(registry)
        return _shared_matcher


def get_title_matcher() -> TitleMatcher:
    """Return the process-wide title matcher.

    Falls back to the bundled registry when none has been configured.
    """
    global _shared_matcher
    if _shared_matcher is None:
        with _shared_lock:
            if _shared_matcher is None:
                # Deferred: the loader pulls in yaml and the bundled data file
                from .loader import bundled_registry

                _shared_matcher = TitleMatcher(bundled_registry())
    return _shared_matcher


def reset_title_matcher() -> None:
    """Forget the process-wide matcher. Intended for tests."""
    global _shared_matcher
    with _shared_lock:
        _shared_matcher = None
