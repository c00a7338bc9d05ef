"""Infrastructure layer: concrete implementations of application ports."""

from contact_picker.infrastructure.config import (
    Settings,
    build_filler,
    build_syncer,
    get_config_path,
    load_settings,
)
from contact_picker.infrastructure.fillers import CommandFiller, KhardFiller, PycarddavFiller
from contact_picker.infrastructure.selectors import FzfSelector
from contact_picker.infrastructure.syncers import CommandSync, PycardsyncerSync, VdirsyncerSync

__all__ = [
    "CommandFiller",
    "CommandSync",
    "FzfSelector",
    "KhardFiller",
    "PycarddavFiller",
    "PycardsyncerSync",
    "Settings",
    "VdirsyncerSync",
    "build_filler",
    "build_syncer",
    "get_config_path",
    "load_settings",
]
