"""Unit tests for the license registry and title matcher."""

import re
import threading

import pytest
from pydantic import ValidationError

from licensetext.config import RegistryError
from licensetext.registry import (
    LicenseEntry,
    StaticLicenseRegistry,
    TitleMatcher,
    bundled_registry,
    configure_title_matcher,
    derive_title_pattern,
    get_title_matcher,
    load_registry,
    reset_title_matcher,
)
from tests.helpers import CountingRegistry, fixture_registry


@pytest.fixture
def shared_matcher_reset():
    """Reset the process-wide title matcher around a test."""
    reset_title_matcher()
    yield
    reset_title_matcher()


@pytest.fixture
def write_registry(tmp_path):
    """Write YAML text to a registry file and return its path."""

    def _write(text):
        path = tmp_path / "licenses.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def title_matches(title, key, candidate):
    return re.fullmatch(derive_title_pattern(title, key), candidate, re.IGNORECASE) is not None


class TestDeriveTitlePattern:
    """Tests for derive_title_pattern()."""

    @pytest.mark.parametrize(
        "candidate",
        [
            "GNU General Public License v3.0",
            "GNU General Public License, version 3",
            "General Public License v3",
            "gnu general public licence version 3.0",
            "GPL-3.0",
            "gpl 3.0 license",
        ],
    )
    def test_gpl_variants(self, candidate):
        """Version spelling, GNU prefix and license word are lenient."""
        assert title_matches("GNU General Public License v3.0", "gpl-3.0", candidate)

    @pytest.mark.parametrize(
        "candidate",
        ["GNU General Public License v2.0", "GNU General Public", "Lesser General Public License v3.0"],
    )
    def test_gpl_non_matches(self, candidate):
        """Other versions and families do not match."""
        assert not title_matches("GNU General Public License v3.0", "gpl-3.0", candidate)

    @pytest.mark.parametrize(
        "candidate", ["Apache License 2.0", "Apache License, Version 2.0", "Apache 2", "apache-2.0"]
    )
    def test_apache_variants(self, candidate):
        """A zero minor version is optional."""
        assert title_matches("Apache License 2.0", "apache-2.0", candidate)

    def test_nonzero_minor_version_required(self):
        """A non-zero minor version must be present."""
        assert title_matches("GNU Lesser General Public License v2.1", "lgpl-2.1", "Lesser General Public License v2.1")
        assert not title_matches("GNU Lesser General Public License v2.1", "lgpl-2.1", "Lesser General Public License v2")

    def test_leading_the_dropped(self):
        """A leading 'The' in the title is not required."""
        assert title_matches("The Unlicense", "unlicense", "Unlicense")

    def test_censored_title(self):
        """An asterisk in the title stands for a 'u'."""
        assert title_matches(
            "Do What The F*ck You Want To Public License",
            "wtfpl",
            "Do What The Fuck You Want To Public License",
        )

    def test_pattern_compiles_without_flags(self):
        """Derived patterns are plain strings that compile."""
        for entry in bundled_registry().all(include_hidden=True):
            re.compile(entry.title_pattern)


class TestLicenseEntry:
    """Tests for LicenseEntry validation."""

    def test_defaults(self):
        """Name defaults to the title and the pattern is derived."""
        entry = LicenseEntry(key=" MIT ", title=" MIT License ")

        assert entry.key == "mit"
        assert entry.title == "MIT License"
        assert entry.name == "MIT License"
        assert entry.title_pattern == derive_title_pattern("MIT License", "mit")
        assert entry.hidden is False
        assert entry.pseudo is False

    def test_explicit_pattern_kept(self):
        """An explicit pattern overrides derivation."""
        entry = LicenseEntry(key="mit", title="MIT License", title_pattern=r"mit|expat")

        assert entry.title_pattern == "mit|expat"

    def test_invalid_pattern(self):
        """Patterns that do not compile are rejected."""
        with pytest.raises(ValidationError, match="Invalid title pattern"):
            LicenseEntry(key="mit", title="MIT License", title_pattern="(")

    def test_inline_global_flags_rejected(self):
        """Whole-pattern flags cannot be embedded in the title alternation."""
        with pytest.raises(ValidationError, match="inline global flags"):
            LicenseEntry(key="mit", title="MIT License", title_pattern="(?i)mit")

    def test_scoped_flags_allowed(self):
        """Flags scoped to a group are fine inside the alternation."""
        entry = LicenseEntry(key="mit", title="MIT License", title_pattern="(?i:mit)")
        matcher = TitleMatcher(StaticLicenseRegistry([entry]))

        assert matcher.pattern.match("MIT License\n\nbody")

    def test_blank_key(self):
        """Whitespace-only keys are rejected."""
        with pytest.raises(ValidationError):
            LicenseEntry(key="   ", title="MIT License")

    @pytest.mark.parametrize(
        "title,expected",
        [
            ("GNU General Public License v3.0", "GNU General Public License"),
            ("Apache License 2.0", "Apache License"),
            ("MIT License", "MIT License"),
        ],
    )
    def test_name_without_version(self, title, expected):
        """A trailing version is removed from the name."""
        assert LicenseEntry(key="x", title=title).name_without_version == expected


class TestStaticLicenseRegistry:
    """Tests for StaticLicenseRegistry."""

    def test_all_defaults(self):
        """Hidden entries are excluded and pseudo entries included by default."""
        keys = [entry.key for entry in fixture_registry().all()]

        assert keys == ["apache-2.0", "gpl-3.0", "mit", "other"]

    def test_all_for_titles(self):
        """The title matcher's query includes hidden and excludes pseudo entries."""
        entries = fixture_registry().all(include_hidden=True, include_pseudo=False)

        assert [entry.key for entry in entries] == ["apache-2.0", "gpl-3.0", "isc", "mit"]

    def test_find(self):
        """Lookup ignores case and surrounding whitespace."""
        registry = fixture_registry()

        assert registry.find(" MIT ").title == "MIT License"
        assert registry.find("bsd") is None
        assert "Apache-2.0" in registry
        assert len(registry) == 5


class TestLoadRegistry:
    """Tests for YAML registry loading."""

    def test_load_list(self, write_registry):
        """A bare list of entries is accepted."""
        registry = load_registry(write_registry("- key: mit\n  title: MIT License\n"))

        assert registry.find("mit").title == "MIT License"

    def test_load_mapping(self, write_registry):
        """A 'licenses' key holding the list is accepted."""
        registry = load_registry(
            write_registry(
                "licenses:\n"
                "  - key: mit\n    title: MIT License\n"
                "  - key: isc\n    title: ISC License\n    hidden: true\n"
            )
        )

        assert len(registry) == 2
        assert registry.find("isc").hidden is True

    def test_missing_file(self, tmp_path):
        """A missing file is a registry error."""
        with pytest.raises(RegistryError, match="not found"):
            load_registry(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, write_registry):
        """Unparsable YAML is a registry error."""
        with pytest.raises(RegistryError, match="Failed to parse"):
            load_registry(write_registry("licenses: [unclosed\n"))

    @pytest.mark.parametrize("text", ["", "licenses: []\n", "other: 1\n"])
    def test_empty(self, write_registry, text):
        """A registry without entries is rejected."""
        with pytest.raises(RegistryError, match="empty"):
            load_registry(write_registry(text))

    def test_not_a_list(self, write_registry):
        """The entries must be a list."""
        with pytest.raises(RegistryError, match="must be a list"):
            load_registry(write_registry("licenses: mit\n"))

    def test_invalid_entries_reported_with_index(self, write_registry):
        """Every invalid entry is reported with its position."""
        with pytest.raises(RegistryError) as exc_info:
            load_registry(write_registry("- key: mit\n  title: MIT License\n- key: isc\n"))

        assert exc_info.value.errors == ["licenses -> 1 -> Missing required field: title"]

    def test_bundled_registry(self):
        """The bundled registry loads and is cached."""
        registry = bundled_registry()

        assert registry is bundled_registry()
        assert registry.find("mit").title == "MIT License"
        assert registry.find("isc").hidden is True
        assert registry.find("other").pseudo is True
        assert "other" not in [e.key for e in registry.all(include_pseudo=False)]


class TestTitleMatcher:
    """Tests for TitleMatcher."""

    @pytest.mark.parametrize(
        "text",
        [
            "MIT License\n\nbody",
            "The MIT License (MIT)\n\nbody",
            "(MIT)\nbody",
            "  ISC License\nbody",
            "GNU GENERAL PUBLIC LICENSE\n  Version 3, 29 June 2007\n",
            "Apache License\nbody",
        ],
    )
    def test_matches_known_titles(self, text):
        """Known titles, including hidden ones, match at the start."""
        assert TitleMatcher(fixture_registry()).pattern.match(text)

    @pytest.mark.parametrize("text", ["Other\n\nbody", "Permission is granted\nMIT License"])
    def test_rejects(self, text):
        """Pseudo licenses and titles later in the text do not match."""
        assert TitleMatcher(fixture_registry()).pattern.match(text) is None

    def test_empty_registry_matches_nothing(self):
        """A matcher over no licenses never matches."""
        matcher = TitleMatcher(StaticLicenseRegistry([]))

        assert matcher.pattern.search("MIT License") is None

    def test_built_once(self):
        """The registry is queried once, with hidden in and pseudo out."""
        registry = CountingRegistry(fixture_registry())
        matcher = TitleMatcher(registry)

        first = matcher.pattern
        second = matcher.pattern

        assert first is second
        assert registry.calls == [{"include_hidden": True, "include_pseudo": False}]

    def test_built_once_under_concurrency(self):
        """Concurrent first access builds a single pattern."""
        registry = CountingRegistry(fixture_registry())
        matcher = TitleMatcher(registry)
        patterns = []

        threads = [threading.Thread(target=lambda: patterns.append(matcher.pattern)) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry.calls) == 1
        assert all(pattern is patterns[0] for pattern in patterns)

    def test_shared_matcher(self, shared_matcher_reset):
        """configure_title_matcher installs the process-wide matcher."""
        registry = fixture_registry()

        installed = configure_title_matcher(registry)

        assert get_title_matcher() is installed
        assert installed.registry is registry

    def test_shared_matcher_defaults_to_bundled(self, shared_matcher_reset):
        """Without configuration the bundled registry is used."""
        assert get_title_matcher().registry is bundled_registry()
        assert get_title_matcher() is get_title_matcher()
