#!/usr/bin/env python3
"""Run the configured contact filler once and report lines that do not parse.

Useful after switching filler or upgrading khard: prints how many lines parsed
and lists the malformed ones. Run from repo root with .env / config in place.
Exit status 1 if any line is malformed or the filler fails.
"""
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from dotenv import load_dotenv  # noqa: E402

from contact_picker.application import ContactCache, ExternalCommandFailure  # noqa: E402
from contact_picker.domain import parse_line  # noqa: E402
from contact_picker.infrastructure import build_filler, load_settings  # noqa: E402

load_dotenv(REPO_ROOT / ".env")


def main() -> int:
    settings = load_settings()
    filler = build_filler(settings)
    cache = ContactCache(filler)
    try:
        lines = cache.get_or_fill()
    except ExternalCommandFailure as e:
        print(f"Filler {filler!r} failed: {e}")
        return 1
    malformed = [line for line in lines if parse_line(line) is None]
    print(f"{len(lines) - len(malformed)} contact(s) parsed from {filler!r}")
    if not malformed:
        return 0
    print(f"{len(malformed)} malformed line(s):")
    for line in malformed:
        print(f"  {line!r}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
