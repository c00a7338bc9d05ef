"""Tests for FzfSelector using small Python scripts in place of fzf."""

import sys

import pytest

from contact_picker.application import ExternalCommandFailure, format_selection
from contact_picker.infrastructure import FzfSelector

LINES = ["a@b.com\tAda\t", "x@y.com\tX Y\thome"]


def _fake_fzf(code: str) -> list[str]:
    # fzf options are appended after the script and land in sys.argv.
    return [sys.executable, "-c", code]


def test_confirmed_lines_go_through_action() -> None:
    selector = FzfSelector(_fake_fzf("import sys; sys.stdout.write(sys.stdin.read())"))
    assert selector.select(LINES, format_selection) == '"Ada" <a@b.com>, "X Y" <x@y.com>'


def test_fzf_receives_tab_delimiter_and_multi() -> None:
    code = "import sys; assert '--multi' in sys.argv and '\\t' in sys.argv; print(sys.stdin.readline(), end='')"
    selector = FzfSelector(_fake_fzf(code))
    assert selector.select(LINES, format_selection) == '"Ada" <a@b.com>'


def test_confirmed_line_with_unicode_separator_stays_whole() -> None:
    line = "a@b.com\tAda\u2028Lovelace\t"
    selector = FzfSelector(_fake_fzf("import sys; sys.stdout.buffer.write(sys.stdin.buffer.read())"))
    assert selector.select([line], format_selection) == '"Ada\u2028Lovelace" <a@b.com>'


@pytest.mark.parametrize("status", [1, 130])
def test_no_match_or_escape_cancels(status) -> None:
    selector = FzfSelector(_fake_fzf(f"import sys; sys.stdin.read(); sys.exit({status})"))
    called = []
    assert selector.select(LINES, lambda lines: called.append(lines) or "x") is None
    assert called == []


def test_other_exit_status_raises() -> None:
    selector = FzfSelector(_fake_fzf("import sys; sys.stdin.read(); sys.exit(2)"))
    with pytest.raises(ExternalCommandFailure) as exc:
        selector.select(LINES, format_selection)
    assert exc.value.returncode == 2


def test_missing_fzf_raises() -> None:
    with pytest.raises(ExternalCommandFailure):
        FzfSelector(["contact-picker-no-such-fzf"]).select(LINES, format_selection)


def test_no_candidates_returns_none_without_running() -> None:
    selector = FzfSelector(["contact-picker-no-such-fzf"])
    assert selector.select([], format_selection) is None
