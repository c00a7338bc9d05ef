"""Load picker settings from YAML and environment; build the configured strategies."""

import logging
import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from contact_picker.application.ports import ContactFiller, ServerSync
from contact_picker.infrastructure.fillers import CommandFiller, KhardFiller, PycarddavFiller
from contact_picker.infrastructure.syncers import CommandSync, PycardsyncerSync, VdirsyncerSync

logger = logging.getLogger(__name__)

FILLERS = ("khard", "pycarddav", "command")
SYNCS = ("vdirsyncer", "pycardsyncer", "command", "none")
KNOWN_KEYS = {"filler", "filler_command", "sync", "sync_command", "sync_log", "fzf_command"}


def _xdg_dir(env_name: str, fallback: str) -> Path:
    value = os.environ.get(env_name, "").strip()
    return Path(value) if value else Path.home() / fallback


def default_sync_log() -> Path:
    return _xdg_dir("XDG_CACHE_HOME", ".cache") / "contact-picker" / "sync.log"


@dataclass(frozen=True)
class Settings:
    """Strategy names and their arguments. Commands are argv lists."""

    filler: str = "khard"
    filler_command: tuple[str, ...] = ()
    sync: str = "vdirsyncer"
    sync_command: tuple[str, ...] = ()
    sync_log: Path = field(default_factory=default_sync_log)
    fzf_command: tuple[str, ...] = ("fzf",)

    def __post_init__(self):
        if self.filler not in FILLERS:
            raise ValueError(f"Unknown filler '{self.filler}'; expected one of {', '.join(FILLERS)}")
        if self.sync not in SYNCS:
            raise ValueError(f"Unknown sync '{self.sync}'; expected one of {', '.join(SYNCS)}")
        if self.filler == "command" and not self.filler_command:
            raise ValueError("filler 'command' requires 'filler_command'")
        if self.sync == "command" and not self.sync_command:
            raise ValueError("sync 'command' requires 'sync_command'")
        if not self.fzf_command:
            raise ValueError("'fzf_command' must be non-empty")


def get_config_path() -> Path:
    """Return the YAML config path (CONTACT_PICKER_CONFIG env or the XDG default)."""
    path = os.environ.get("CONTACT_PICKER_CONFIG", "").strip()
    if path:
        return Path(path).expanduser().resolve()
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / "contact-picker" / "config.yaml"


def _as_command(key: str, value) -> tuple[str, ...]:
    """Accept an argv list or a shell-style string."""
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(shlex.split(value))
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ValueError(f"'{key}' must be a string or a list of strings")


def _as_name(key: str, value) -> str:
    if value is None:
        return "none"
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value.strip().lower()


def load_settings(path: Path | None = None) -> Settings:
    """Read the YAML file if it exists, then apply environment overrides."""
    explicit = path is not None
    if path is None:
        path = get_config_path()
    raw: dict = {}
    if path.exists():
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config {path} must be a mapping")
        unknown = set(loaded) - KNOWN_KEYS
        if unknown:
            raise ValueError(f"Config {path} has unknown keys: {', '.join(sorted(unknown))}")
        raw = loaded
        logger.info("Loaded settings from %s", path)
    elif explicit:
        raise ValueError(f"Config file {path} does not exist")

    kwargs: dict = {}
    if "filler" in raw:
        kwargs["filler"] = _as_name("filler", raw["filler"])
    if "sync" in raw:
        kwargs["sync"] = _as_name("sync", raw["sync"])
    if "filler_command" in raw:
        kwargs["filler_command"] = _as_command("filler_command", raw["filler_command"])
    if "sync_command" in raw:
        kwargs["sync_command"] = _as_command("sync_command", raw["sync_command"])
    if "fzf_command" in raw:
        kwargs["fzf_command"] = _as_command("fzf_command", raw["fzf_command"])
    if raw.get("sync_log"):
        kwargs["sync_log"] = Path(str(raw["sync_log"])).expanduser()

    filler = os.environ.get("CONTACT_PICKER_FILLER", "").strip()
    if filler:
        kwargs["filler"] = filler.lower()
    sync = os.environ.get("CONTACT_PICKER_SYNC", "").strip()
    if sync:
        kwargs["sync"] = sync.lower()
    sync_log = os.environ.get("CONTACT_PICKER_SYNC_LOG", "").strip()
    if sync_log:
        kwargs["sync_log"] = Path(sync_log).expanduser()

    return Settings(**kwargs)


def build_filler(settings: Settings) -> ContactFiller:
    if settings.filler == "khard":
        return KhardFiller()
    if settings.filler == "pycarddav":
        return PycarddavFiller()
    return CommandFiller(list(settings.filler_command))


def build_syncer(settings: Settings) -> ServerSync | None:
    """Return the configured syncer, or None when sync is 'none'."""
    if settings.sync == "none":
        return None
    if settings.sync == "vdirsyncer":
        return VdirsyncerSync(settings.sync_log)
    if settings.sync == "pycardsyncer":
        return PycardsyncerSync(settings.sync_log)
    return CommandSync(list(settings.sync_command), settings.sync_log)
