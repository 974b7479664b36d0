"""Default copyright-line pattern consumed by the copyright strip step.

Matches one or more copyright notices at the very start of the content,
each optionally followed by a "with Reserved Font Name" continuation line
(as used by the SIL Open Font License).
"""

import re

COPYRIGHT_SYMBOLS = r"(?:copyright|\(c\)|©)"
MAIN_LINE_REGEX = r"[_*\-\s]*" + COPYRIGHT_SYMBOLS + r".*$"
OPTIONAL_LINE_REGEX = r"[_*\-\s]*with Reserved Font Name.*$"

COPYRIGHT_PATTERN = re.compile(
    r"\A\s*(?:" + MAIN_LINE_REGEX + r"(?:" + OPTIONAL_LINE_REGEX + r")*)+$",
    re.IGNORECASE | re.MULTILINE,
)
