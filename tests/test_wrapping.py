"""Unit tests for display helpers."""

import pytest

from licensetext.utils import format_percent, wrap


class TestWrap:
    """Tests for wrap function."""

    def test_none(self):
        """None passes through."""
        assert wrap(None) is None

    def test_long_line(self):
        """Long lines are broken on whitespace."""
        assert wrap("one two three four", 9) == "one two\nthree\nfour"

    def test_short_line_unchanged(self):
        """Lines within the width are kept."""
        assert wrap("short line", 80) == "short line"

    def test_soft_wraps_joined(self):
        """Single newlines inside a paragraph are joined."""
        assert wrap("one\ntwo\n\nthree", 80) == "one two\n\nthree"

    def test_bullets_spaced(self):
        """Bullets get blank lines around them."""
        assert wrap("intro\n\n- item one\n\n- item two", 80) == (
            "intro\n\n\n-  item one\n\n\n-  item two"
        )

    def test_horizontal_rule_kept(self):
        """Horizontal rules are never re-wrapped."""
        rule = "-" * 100
        text = f"intro\n\n{rule}\n\nend"

        assert wrap(text, 20) == text

    @pytest.mark.parametrize("width", [10, 25, 80])
    def test_width_respected(self, width):
        """No wrapped line exceeds the width."""
        text = " ".join(["permission is hereby granted free of charge"] * 10)

        assert all(len(line) <= width for line in wrap(text, width).split("\n"))


class TestFormatPercent:
    """Tests for format_percent function."""

    @pytest.mark.parametrize(
        "value,expected",
        [(100.0, "100.00%"), (97.123, "97.12%"), (0.0, "0.00%"), (12.346, "12.35%")],
    )
    def test_format(self, value, expected):
        """Scores render with two decimals and a percent sign."""
        assert format_percent(value) == expected
