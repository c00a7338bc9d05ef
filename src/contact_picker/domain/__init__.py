"""Domain layer: entities and line parsing. No dependencies on outer layers."""

from contact_picker.domain.entities import Contact, RefreshLevel
from contact_picker.domain.mutt import parse_line

__all__ = ["Contact", "RefreshLevel", "parse_line"]
