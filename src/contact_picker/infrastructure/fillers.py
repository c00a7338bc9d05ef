"""Built-in ContactFiller variants: external commands that print mutt lines."""

from contact_picker.infrastructure.process import run_capture, split_lines

KHARD_COMMAND = ["khard", "email", "--parsable"]
PYCARDDAV_COMMAND = ["pc_query", "-m", ""]


class CommandFiller:
    """Fills from any command whose stdout is a header line followed by mutt lines."""

    def __init__(self, command: list[str]) -> None:
        if not command:
            raise ValueError("Filler command must be non-empty.")
        self.command = list(command)

    def fill(self, target: list[str]) -> None:
        target.clear()
        output = run_capture(self.command)
        target.extend(split_lines(output))
        # First line is the lister's "searching for ..." banner.
        del target[:1]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.command!r})"


class KhardFiller(CommandFiller):
    def __init__(self) -> None:
        super().__init__(KHARD_COMMAND)


class PycarddavFiller(CommandFiller):
    def __init__(self) -> None:
        super().__init__(PYCARDDAV_COMMAND)
