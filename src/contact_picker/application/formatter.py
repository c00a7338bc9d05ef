"""Render selected mutt lines as an address list."""

import logging
from collections.abc import Sequence

from contact_picker.domain import Contact, parse_line

logger = logging.getLogger(__name__)

SEPARATOR = ", "


def format_contact(contact: Contact) -> str:
    return f'"{contact.name}" <{contact.email}>'


def format_selection(lines: Sequence[str]) -> str:
    """Return '"Name" <email>' for each line, joined by ', ' in selection order.

    Lines that do not parse are left out.
    """
    out = []
    for line in lines:
        contact = parse_line(line)
        if contact is None:
            logger.warning("Skipping malformed contact line: %r", line)
            continue
        out.append(format_contact(contact))
    return SEPARATOR.join(out)
