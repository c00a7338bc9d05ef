"""Application layer: use cases, ports, and the contact cache. Depends only on domain."""

from contact_picker.application.cache import ContactCache
from contact_picker.application.errors import ExternalCommandFailure
from contact_picker.application.formatter import format_contact, format_selection
from contact_picker.application.ports import ContactFiller, ContactSelector, ServerSync
from contact_picker.application.search_session import SearchSession

__all__ = [
    "ContactCache",
    "ContactFiller",
    "ContactSelector",
    "ExternalCommandFailure",
    "SearchSession",
    "ServerSync",
    "format_contact",
    "format_selection",
]
