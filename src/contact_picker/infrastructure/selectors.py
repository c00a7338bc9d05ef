"""ContactSelector backed by the fzf binary."""

import logging
import subprocess
from collections.abc import Callable, Sequence

from contact_picker.application.errors import ExternalCommandFailure
from contact_picker.infrastructure.process import split_lines

logger = logging.getLogger(__name__)

# fzf exit codes: 1 = no match, 130 = interrupted with CTRL-C or ESC.
FZF_NO_MATCH = 1
FZF_INTERRUPTED = 130

# Show "name  email" while returning the untouched line.
FZF_OPTIONS = ["--multi", "--delimiter", "\t", "--with-nth", "2,1", "--prompt", "contact> "]


class FzfSelector:
    """Pipes candidates to fzf --multi and hands the confirmed lines to the action."""

    def __init__(self, command: list[str] | None = None) -> None:
        self.command = list(command or ["fzf"])

    def select(
        self,
        candidates: Sequence[str],
        action: Callable[[list[str]], str],
    ) -> str | None:
        if not candidates:
            logger.warning("No contacts to choose from")
            return None
        argv = self.command + FZF_OPTIONS
        try:
            result = subprocess.run(
                argv,
                input=("\n".join(candidates) + "\n").encode("utf-8"),
                stdout=subprocess.PIPE,
                check=False,
            )
        except FileNotFoundError as e:
            raise ExternalCommandFailure(argv, None) from e
        if result.returncode in (FZF_NO_MATCH, FZF_INTERRUPTED):
            return None
        if result.returncode != 0:
            raise ExternalCommandFailure(argv, result.returncode)
        output = result.stdout.decode("utf-8", errors="replace")
        chosen = [line for line in split_lines(output) if line]
        if not chosen:
            return None
        return action(chosen)
