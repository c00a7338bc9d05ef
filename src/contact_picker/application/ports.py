"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable, Sequence
from typing import Protocol


class ContactFiller(Protocol):
    """Enumerates contacts as mutt lines by running an external lister."""

    def fill(self, target: list[str]) -> None:
        """Replace target's content with the lister's output, header line removed.

        Raises ExternalCommandFailure if the command is missing or fails.
        """
        ...


class ServerSync(Protocol):
    """Reconciles the local address book with its server."""

    def sync(self) -> None:
        """Run the sync command to completion. Output goes to the sync log."""
        ...


class ContactSelector(Protocol):
    """Interactive selection over candidate lines (fzf, an editor widget, ...)."""

    def select(
        self,
        candidates: Sequence[str],
        action: Callable[[list[str]], str],
    ) -> str | None:
        """Present candidates; on confirm return action(confirmed_lines), on cancel None."""
        ...
