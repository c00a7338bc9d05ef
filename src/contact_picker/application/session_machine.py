"""
Search session lifecycle as an XState machine, run with xstate-python.

The JSON is standard XState (id, initial, states with on: { EVENT: target }),
so flows/search_session.json can be opened in Stately Studio.
"""

import json
import os
from pathlib import Path

from xstate.machine import Machine

IDLE = "idle"
SYNCING = "syncing"
INVALIDATING = "invalidating"
FILLING = "filling"
PRESENTING = "presenting"

BUNDLED_MACHINE = Path(__file__).resolve().parent.parent / "flows" / "search_session.json"


class SessionMachine:
    """A loaded machine definition plus the xstate Machine built from it."""

    def __init__(self, config: dict, path: Path | None = None) -> None:
        if "initial" not in config or "states" not in config:
            raise ValueError("Machine must have 'initial' and 'states'")
        self.config = config
        self.path = path
        self._machine = Machine(config)

    @property
    def initial(self) -> str:
        return self.config["initial"]

    @property
    def states(self) -> set[str]:
        return set(self.config["states"])

    def next_state(self, state_value: str, event: str) -> str | None:
        """Return the state reached from state_value on event, or None if the event is not accepted there."""
        if state_value not in self.config["states"]:
            return None
        current = self._machine.state_from(state_value)
        reached = self._machine.transition(current, event)
        if reached.value == state_value:
            return None
        return reached.value


def get_machine_path() -> Path:
    """Return the machine JSON path (SEARCH_SESSION_MACHINE env or the bundled file)."""
    path = os.environ.get("SEARCH_SESSION_MACHINE", "").strip()
    if path:
        return Path(path).resolve()
    return BUNDLED_MACHINE


def load_machine(path: Path | None = None) -> SessionMachine:
    if path is None:
        path = get_machine_path()
    config = json.loads(path.read_text(encoding="utf-8"))
    return SessionMachine(config, path)


# Loaded machines by resolved path; the JSON files do not change while running.
_loaded: dict[Path, SessionMachine] = {}


def get_machine() -> SessionMachine:
    path = get_machine_path().resolve()
    if path not in _loaded:
        _loaded[path] = load_machine(path)
    return _loaded[path]
