"""HTML to markdown-like text conversion for HTML-sourced license files.

Produces the same markup shapes the rest of the pipeline knows how to strip
(``#`` headings, ``*emphasis*``, ``[text](url)`` links, ``- `` bullets,
``>`` quotes, ``---`` rules). Tags without a mapping are bypassed: their
children are converted and the tag itself disappears.
"""

import re
from typing import List

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag

_SKIPPED_TAGS = {"script", "style", "head", "title", "meta", "link", "noscript"}
_BLOCK_TAGS = {"p", "div", "section", "article", "header", "footer", "main", "body", "html", "dl", "dd", "dt", "table", "tr"}
_HEADING_LEVELS = {f"h{n}": n for n in range(1, 7)}


def html_to_markdown(html_text: str) -> str:
    """Convert an HTML document to markdown-like plain text.

    Malformed markup never raises; the lenient ``html.parser`` builder
    recovers what it can.

    Args:
        html_text: Raw HTML source

    Returns:
        Markdown-like text with paragraphs separated by blank lines
    """
    if not html_text:
        return ""

    soup = BeautifulSoup(html_text, "html.parser")
    text = _convert_children(soup)

    # Trailing spaces on lines, and runs of blank lines
    text = re.sub(r"[ \t]+\n", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()


def _convert_children(node) -> str:
    return "".join(_convert(child) for child in node.children)


def _convert(node) -> str:
    if isinstance(node, (Comment, Doctype)):
        return ""
    if isinstance(node, NavigableString):
        return re.sub(r"\s+", " ", str(node))
    if not isinstance(node, Tag):
        return ""

    name = node.name.lower()

    if name in _SKIPPED_TAGS:
        return ""
    if name in _HEADING_LEVELS:
        inner = _convert_children(node).strip()
        return f"\n\n{'#' * _HEADING_LEVELS[name]} {inner}\n\n"
    if name in _BLOCK_TAGS:
        return f"\n\n{_convert_children(node).strip()}\n\n"
    if name == "br":
        return "\n"
    if name == "hr":
        return "\n\n---\n\n"
    if name in ("em", "i", "cite"):
        return _wrap_inline(node, "_")
    if name in ("strong", "b"):
        return _wrap_inline(node, "**")
    if name == "code":
        return _wrap_inline(node, "`")
    if name == "pre":
        return f"\n\n{node.get_text()}\n\n"
    if name == "a":
        inner = _convert_children(node).strip()
        href = node.get("href")
        if href and inner:
            return f"[{inner}]({href})"
        return inner
    if name in ("ul", "ol"):
        return _convert_list(node, ordered=name == "ol")
    if name == "blockquote":
        inner = _convert_children(node).strip()
        quoted = "\n".join(f"> {line}" if line else ">" for line in inner.split("\n"))
        return f"\n\n{quoted}\n\n"

    # Unknown tag: keep its content
    return _convert_children(node)


def _wrap_inline(node: Tag, marker: str) -> str:
    inner = _convert_children(node)
    stripped = inner.strip()
    if not stripped:
        return inner
    leading = " " if inner[:1].isspace() else ""
    trailing = " " if inner[-1:].isspace() else ""
    return f"{leading}{marker}{stripped}{marker}{trailing}"


def _convert_list(node: Tag, ordered: bool) -> str:
    items: List[str] = []
    for index, item in enumerate(node.find_all("li", recursive=False), start=1):
        bullet = f"{index}." if ordered else "-"
        body = _convert_children(item).strip()
        body = re.sub(r"\n{2,}", "\n", body).replace("\n", "\n   ")
        items.append(f"{bullet} {body}")
    return "\n\n" + "\n".join(items) + "\n\n"
