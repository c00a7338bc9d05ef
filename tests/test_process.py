"""Tests for the command-backed fillers and syncers, run against the current interpreter."""

import logging
import sys

import pytest

from contact_picker.application import ContactCache, ExternalCommandFailure
from contact_picker.domain import Contact, parse_line
from contact_picker.infrastructure import (
    CommandFiller,
    CommandSync,
    KhardFiller,
    PycarddavFiller,
    PycardsyncerSync,
    VdirsyncerSync,
)
from contact_picker.infrastructure.process import split_lines

MISSING = "contact-picker-no-such-command"


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


def test_filler_strips_header_line() -> None:
    filler = CommandFiller(_python("print('IGNORED HEADER'); print('x@y.com\\tX Y\\t')"))
    target = ["stale"]
    filler.fill(target)
    assert target == ["x@y.com\tX Y\t"]
    assert parse_line(target[0]) == Contact(name="X Y", email="x@y.com")


def test_cache_over_command_filler_end_to_end() -> None:
    code = "import sys; sys.stdout.write('IGNORED HEADER\\nx@y.com\\tX Y\\t\\n')"
    cache = ContactCache(CommandFiller(_python(code)))
    assert cache.get_or_fill() == ["x@y.com\tX Y\t"]


def test_filler_with_header_only_yields_nothing() -> None:
    filler = CommandFiller(_python("print('searching for ...')"))
    target = []
    filler.fill(target)
    assert target == []


def test_filler_reads_utf8() -> None:
    code = "import sys; sys.stdout.buffer.write('h\\nz@z.com\\tZo\\u00eb\\t\\n'.encode('utf-8'))"
    target = []
    CommandFiller(_python(code)).fill(target)
    assert parse_line(target[0]).name == "Zoë"


def test_filler_splits_on_newline_only() -> None:
    code = (
        "import sys; sys.stdout.buffer.write("
        "'HEADER\\na@b.com\\tAda\\u2028Lovelace\\t\\nc@d.com\\tCy\\x1cD\\t\\n'.encode('utf-8'))"
    )
    cache = ContactCache(CommandFiller(_python(code)))

    lines = cache.get_or_fill()

    assert lines == ["a@b.com\tAda\u2028Lovelace\t", "c@d.com\tCy\x1cD\t"]
    assert parse_line(lines[0]) == Contact(name="Ada\u2028Lovelace", email="a@b.com")
    assert parse_line(lines[1]) == Contact(name="Cy\x1cD", email="c@d.com")


def test_filler_handles_crlf_and_keeps_lone_cr() -> None:
    code = "import sys; sys.stdout.buffer.write(b'HEADER\\r\\na@b.com\\tA\\rB\\t\\r\\n')"
    target = []
    CommandFiller(_python(code)).fill(target)
    assert target == ["a@b.com\tA\rB\t"]


def test_split_lines_without_trailing_newline() -> None:
    assert split_lines("h\nx@y.com\tX\t") == ["h", "x@y.com\tX\t"]
    assert split_lines("") == []


def test_filler_discards_stderr() -> None:
    code = "import sys; print('h'); print('a@b.com\\tAda\\t'); print('noise', file=sys.stderr)"
    target = []
    CommandFiller(_python(code)).fill(target)
    assert target == ["a@b.com\tAda\t"]


def test_filler_nonzero_exit_raises() -> None:
    filler = CommandFiller(_python("import sys; print('h'); sys.exit(3)"))
    with pytest.raises(ExternalCommandFailure) as exc:
        filler.fill([])
    assert exc.value.returncode == 3


def test_filler_missing_command_raises() -> None:
    with pytest.raises(ExternalCommandFailure) as exc:
        CommandFiller([MISSING]).fill([])
    assert exc.value.returncode is None
    assert MISSING in str(exc.value)


def test_empty_filler_command_rejected() -> None:
    with pytest.raises(ValueError):
        CommandFiller([])


def test_builtin_filler_commands() -> None:
    assert KhardFiller().command == ["khard", "email", "--parsable"]
    assert PycarddavFiller().command == ["pc_query", "-m", ""]


def test_sync_appends_output_to_log(tmp_path) -> None:
    log_path = tmp_path / "logs" / "sync.log"
    syncer = CommandSync(_python("import sys; print('synced'); print('warn', file=sys.stderr)"), log_path)

    syncer.sync()
    syncer.sync()

    text = log_path.read_text(encoding="utf-8")
    assert text.count("synced") == 2
    assert "warn" in text


def test_sync_nonzero_exit_is_logged_not_raised(tmp_path, caplog) -> None:
    syncer = CommandSync(_python("import sys; sys.exit(2)"), tmp_path / "sync.log")
    with caplog.at_level(logging.WARNING):
        syncer.sync()
    assert "status 2" in caplog.text


def test_sync_missing_command_raises(tmp_path) -> None:
    log_path = tmp_path / "sync.log"
    with pytest.raises(ExternalCommandFailure):
        CommandSync([MISSING], log_path).sync()
    assert "command not found" in log_path.read_text(encoding="utf-8")


def test_builtin_sync_commands(tmp_path) -> None:
    assert VdirsyncerSync(tmp_path / "s.log").command == ["vdirsyncer", "sync"]
    assert PycardsyncerSync(tmp_path / "s.log").command == ["pycardsyncer"]
