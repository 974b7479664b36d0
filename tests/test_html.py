"""Unit tests for HTML to markdown-like conversion."""

import pytest

from licensetext.normalization.html import html_to_markdown


class TestHtmlToMarkdown:
    """Tests for html_to_markdown()."""

    def test_heading_and_paragraph(self):
        """Headings get '#' markers and paragraphs are separated."""
        html = "<h1>MIT License</h1><p>Permission is <em>hereby</em> granted.</p>"

        assert html_to_markdown(html) == "# MIT License\n\nPermission is _hereby_ granted."

    def test_heading_levels(self):
        """Heading depth is kept."""
        assert html_to_markdown("<h3>Terms</h3>") == "### Terms"

    def test_strong_and_code(self):
        """Bold and code spans get their markers."""
        assert html_to_markdown("<b>bold</b> and <code>x</code>") == "**bold** and `x`"

    def test_link(self):
        """Links become markdown links."""
        html = '<p>See <a href="https://example.com">the site</a>.</p>'

        assert html_to_markdown(html) == "See [the site](https://example.com)."

    def test_link_without_href(self):
        """Anchors without a target keep only their text."""
        assert html_to_markdown("<a name='top'>Top</a>") == "Top"

    @pytest.mark.parametrize(
        "tag,expected",
        [("ul", "- one\n- two"), ("ol", "1. one\n2. two")],
    )
    def test_lists(self, tag, expected):
        """List items get bullets or numbers."""
        assert html_to_markdown(f"<{tag}><li>one</li><li>two</li></{tag}>") == expected

    def test_blockquote(self):
        """Block quotes get '>' markers."""
        assert html_to_markdown("<blockquote><p>quoted</p></blockquote>") == "> quoted"

    def test_line_break_and_rule(self):
        """Line breaks and horizontal rules are kept."""
        html = "<p>line one<br>line two</p><hr><p>after</p>"

        assert html_to_markdown(html) == "line one\nline two\n\n---\n\nafter"

    def test_skipped_tags(self):
        """Head, script and style content is dropped."""
        html = (
            "<html><head><title>License</title><style>p {}</style></head>"
            "<body><p>Text</p><script>var a;</script></body></html>"
        )

        assert html_to_markdown(html) == "Text"

    def test_unknown_tags_bypassed(self):
        """Unmapped tags disappear but their text stays."""
        assert html_to_markdown("<p><span>kept</span> text</p>") == "kept text"

    def test_comments_dropped(self):
        """HTML comments are not text."""
        assert html_to_markdown("<!-- note --><p>x</p>") == "x"

    def test_whitespace_collapsed(self):
        """Source line breaks inside text collapse to spaces."""
        assert html_to_markdown("<p>a\n    b</p>") == "a b"

    def test_malformed_markup(self):
        """Unclosed tags do not raise."""
        assert html_to_markdown("<p>open <b>bold") == "open **bold**"

    def test_empty(self):
        """Empty input stays empty."""
        assert html_to_markdown("") == ""
