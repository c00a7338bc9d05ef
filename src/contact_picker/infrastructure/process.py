"""Blocking helpers around subprocess. No timeouts, no retries."""

import logging
import subprocess
from datetime import datetime, timezone
from pathlib import Path

from contact_picker.application.errors import ExternalCommandFailure

logger = logging.getLogger(__name__)


def run_capture(command: list[str]) -> str:
    """Run command and return its stdout as text. stderr is discarded.

    Raises ExternalCommandFailure if the executable is missing or exits non-zero.
    """
    logger.info("Running %s", command)
    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError as e:
        raise ExternalCommandFailure(command, None) from e
    if result.returncode != 0:
        raise ExternalCommandFailure(command, result.returncode)
    return result.stdout.decode("utf-8", errors="replace")


def split_lines(text: str) -> list[str]:
    """Split on LF only. A trailing LF adds no empty line and CRLF endings lose the CR.

    Other line-break characters (U+2028, FS, a lone CR) stay inside the line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def run_logged(command: list[str], log_path: Path) -> int:
    """Run command with stdout and stderr appended to log_path. Returns the exit status.

    Raises ExternalCommandFailure only if the executable is missing.
    """
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Running %s (output -> %s)", command, log_path)
    with log_path.open("a", encoding="utf-8") as log:
        started = datetime.now(timezone.utc).isoformat()
        log.write(f"--- {started} {' '.join(command)}\n")
        log.flush()
        try:
            result = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                stdout=log,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except FileNotFoundError as e:
            log.write("command not found\n")
            raise ExternalCommandFailure(command, None) from e
    return result.returncode
