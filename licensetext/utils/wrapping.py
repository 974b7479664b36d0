"""Display helpers for normalized license content.

Nothing here is used when comparing documents.
"""

import re
from typing import Optional

from licensetext.normalization.rules import REGEXES

_SOFT_WRAP_REGEX = re.compile(r"([^\n])\n([^\n])")


def wrap(text: Optional[str], line_width: int = 80) -> Optional[str]:
    """Wrap text to the given line width.

    Bullets get blank lines around them, soft-wrapped lines are joined, and
    lines longer than ``line_width`` are re-wrapped on whitespace. Short lines
    and horizontal rules are kept as they are.

    Args:
        text: Text to wrap (None passes through)
        line_width: Maximum line length

    Returns:
        Wrapped text, or None for None input

    Example:
        >>> wrap("one two three four", 9)
        'one two\\nthree\\nfour'
    """
    if text is None:
        return None

    text = REGEXES["bullet"].sub(lambda m: f"\n{m.group(0)}\n", text)
    text = _SOFT_WRAP_REGEX.sub(r"\1 \2", text)

    chunk_regex = re.compile(r"(.{1,%d})(\s+|$)" % line_width)

    lines = []
    for line in text.split("\n"):
        if REGEXES["hrs"].search(line):
            lines.append(line)
        elif len(line) > line_width:
            lines.append(chunk_regex.sub(lambda m: m.group(1) + "\n", line).strip())
        else:
            lines.append(line)

    return "\n".join(lines).strip()


def format_percent(value: float) -> str:
    """Format a score for display.

    Example:
        >>> format_percent(97.123)
        '97.12%'
    """
    return f"{value:.2f}%"
