"""Parsing of mutt query lines (email TAB name TAB extra...)."""

import re

from contact_picker.domain.entities import Contact

# Non-greedy so trailing tab-separated fields are ignored.
MUTT_LINE = re.compile(r"^(.*?)\t(.*?)\t")


def parse_line(line: str) -> Contact | None:
    """Return the Contact for a mutt line, or None if it has fewer than two tabs.

    The email is taken verbatim from the first field and the name from the
    second; neither is trimmed or validated.
    """
    match = MUTT_LINE.match(line)
    if match is None:
        return None
    return Contact(name=match.group(2), email=match.group(1))
