"""One contact search: optional sync and invalidation, fill, present, format."""

import logging
from collections.abc import Callable, Sequence

from contact_picker.application import session_machine
from contact_picker.application.cache import ContactCache
from contact_picker.application.formatter import format_selection
from contact_picker.application.ports import ContactSelector, ServerSync
from contact_picker.domain import RefreshLevel

logger = logging.getLogger(__name__)


class SearchSession:
    """Drives a search through idle -> syncing? -> invalidating? -> filling -> presenting -> idle.

    Steps run strictly in order; any failure returns the session to idle and propagates.
    """

    def __init__(
        self,
        cache: ContactCache,
        selector: ContactSelector,
        *,
        syncer: ServerSync | None = None,
        formatter: Callable[[Sequence[str]], str] = format_selection,
    ) -> None:
        self._cache = cache
        self._selector = selector
        self._syncer = syncer
        self._formatter = formatter
        self._machine = session_machine.get_machine()
        self._state = self._machine.initial

    @property
    def state(self) -> str:
        return self._state

    @property
    def cache(self) -> ContactCache:
        return self._cache

    def _send(self, event: str) -> None:
        next_state = self._machine.next_state(self._state, event)
        if next_state is None:
            raise RuntimeError(f"No transition for {event} from state {self._state!r}")
        logger.debug("Search session %s -> %s (%s)", self._state, next_state, event)
        self._state = next_state

    def run(self, refresh: RefreshLevel = RefreshLevel.NONE) -> str | None:
        """Run one search. Returns the formatted selection, or None if cancelled."""
        if self._state != session_machine.IDLE:
            raise RuntimeError(f"Search already in progress (state {self._state!r})")
        try:
            if refresh is RefreshLevel.DOUBLE:
                if self._syncer is None:
                    logger.warning("Sync requested but no sync strategy is configured")
                else:
                    self._send("SYNC")
                    self._syncer.sync()
            if refresh in (RefreshLevel.SINGLE, RefreshLevel.DOUBLE):
                self._send("INVALIDATE")
                self._cache.reset()
            self._send("FILL")
            lines = self._cache.get_or_fill()
            self._send("PRESENT")
            result = self._selector.select(lines, self._formatter)
        except BaseException:
            if self._state != session_machine.IDLE:
                self._send("FAIL")
            raise
        if result is None:
            self._send("CANCEL")
            logger.info("Contact selection cancelled")
            return None
        self._send("CONFIRM")
        return result
