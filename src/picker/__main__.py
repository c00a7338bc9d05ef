"""
Terminal contact picker: khard/pc_query + fzf, prints the chosen addresses.
Run: python -m picker [-r | -rr] (from repo root, with .env or env vars set).

Each run starts with an empty cache and reads the address book once;
-rr syncs with the server before that read.
"""
import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/picker/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from contact_picker.application import ContactCache, ExternalCommandFailure, SearchSession
from contact_picker.domain import RefreshLevel
from contact_picker.infrastructure import (
    FzfSelector,
    build_filler,
    build_syncer,
    load_settings,
)

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="contact-picker",
        description="Pick contacts with fzf and print them as '\"Name\" <email>' addresses.",
    )
    parser.add_argument(
        "-r",
        "--refresh",
        action="count",
        default=0,
        help=(
            "every run reads the address book afresh; give twice (-rr) "
            "to sync with the server before reading"
        ),
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: $CONTACT_PICKER_CONFIG or ~/.config/contact-picker/config.yaml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level_name = os.environ.get("LOG_LEVEL", "").strip().upper()
    if verbose:
        level = logging.INFO
    elif level_name:
        level = getattr(logging, level_name, logging.WARNING)
    else:
        level = logging.WARNING
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)
    try:
        settings = load_settings(args.config)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    session = SearchSession(
        ContactCache(build_filler(settings)),
        FzfSelector(list(settings.fzf_command)),
        syncer=build_syncer(settings),
    )
    refresh = RefreshLevel.from_count(args.refresh)
    logger.info("Searching contacts (refresh=%s, filler=%s)", refresh.value, settings.filler)
    try:
        result = session.run(refresh)
    except ExternalCommandFailure as e:
        logger.error("%s", e)
        return 1
    if result is None:
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
