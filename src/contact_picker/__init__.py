"""
contact-picker core: clean-architecture layout.

- domain: Contact, RefreshLevel, mutt line parsing. No outer dependencies.
- application: ports (ContactFiller, ServerSync, ContactSelector), ContactCache,
  SearchSession, selection formatting.
- infrastructure: adapters (khard / pc_query fillers, vdirsyncer / pycardsyncer
  syncers, fzf selector) and settings.
"""

from contact_picker.application import (
    ContactCache,
    ContactFiller,
    ContactSelector,
    ExternalCommandFailure,
    SearchSession,
    ServerSync,
    format_contact,
    format_selection,
)
from contact_picker.domain import Contact, RefreshLevel, parse_line

__all__ = [
    "Contact",
    "ContactCache",
    "ContactFiller",
    "ContactSelector",
    "ExternalCommandFailure",
    "RefreshLevel",
    "SearchSession",
    "ServerSync",
    "format_contact",
    "format_selection",
    "parse_line",
]
