"""Built-in ServerSync variants. Output goes to a log file, exit status is only logged."""

import logging
from pathlib import Path

from contact_picker.infrastructure.process import run_logged

logger = logging.getLogger(__name__)

VDIRSYNCER_COMMAND = ["vdirsyncer", "sync"]
PYCARDSYNCER_COMMAND = ["pycardsyncer"]


class CommandSync:
    """Runs a sync command to completion, appending its output to log_path."""

    def __init__(self, command: list[str], log_path: Path) -> None:
        if not command:
            raise ValueError("Sync command must be non-empty.")
        self.command = list(command)
        self.log_path = Path(log_path)

    def sync(self) -> None:
        returncode = run_logged(self.command, self.log_path)
        if returncode != 0:
            logger.warning(
                "Sync command %s exited with status %d, see %s",
                self.command,
                returncode,
                self.log_path,
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.command!r}, {str(self.log_path)!r})"


class VdirsyncerSync(CommandSync):
    def __init__(self, log_path: Path) -> None:
        super().__init__(VDIRSYNCER_COMMAND, log_path)


class PycardsyncerSync(CommandSync):
    def __init__(self, log_path: Path) -> None:
        super().__init__(PYCARDSYNCER_COMMAND, log_path)
