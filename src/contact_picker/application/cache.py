"""In-memory cache of raw contact lines, filled lazily from a ContactFiller."""

import logging

from contact_picker.application.ports import ContactFiller

logger = logging.getLogger(__name__)


class ContactCache:
    """Holds the lines of one successful fill, or nothing.

    Not thread-safe: a reset racing a fill can leave torn content.
    """

    def __init__(self, filler: ContactFiller) -> None:
        self._filler = filler
        self._lines: list[str] = []

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def get_or_fill(self) -> list[str]:
        """Return cached lines, running the filler once if the cache is empty."""
        if self._lines:
            return self._lines
        buffer: list[str] = []
        self._filler.fill(buffer)
        self._lines = buffer
        logger.info("Contact cache filled with %d line(s)", len(buffer))
        return self._lines

    def reset(self) -> None:
        """Drop cached lines. The next get_or_fill refills."""
        self._lines = []
        logger.info("Contact cache reset")
