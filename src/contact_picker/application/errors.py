"""Errors raised across the application boundary."""


class ExternalCommandFailure(RuntimeError):
    """An external command could not be started or exited non-zero.

    returncode is None when the executable was not found.
    """

    def __init__(self, command: list[str], returncode: int | None, detail: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.detail = detail
        if returncode is None:
            message = f"Command not found: {self.command[0] if self.command else '<empty>'}"
        else:
            message = f"Command {' '.join(self.command)!r} exited with status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
