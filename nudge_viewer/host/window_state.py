"""
Window geometry persisted in REAPER's extension state.

Stored as "width height dock x y" under
[cfillion_show_nudge_settings] windowState.
"""

import re
from dataclasses import dataclass, replace
from typing import Optional

from nudge_viewer.config import EXT_SECTION, EXT_WINDOW_STATE, WINDOW_DEFAULT_SIZE

_STATE_RE = re.compile(r"^(\d+) (\d+) (\d+) (-?\d+) (-?\d+)$")


@dataclass(frozen=True)
class WindowState:
    width: int
    height: int
    dock: int = 0
    x: int = 0
    y: int = 0

    @classmethod
    def parse(cls, text: str) -> Optional["WindowState"]:
        match = _STATE_RE.match(str(text or ""))
        if not match:
            return None
        return cls(*(int(v) for v in match.groups()))

    def format(self) -> str:
        return "%d %d %d %d %d" % (self.width, self.height, self.dock, self.x, self.y)

    @property
    def is_docked(self) -> bool:
        return self.dock > 0


DEFAULT_WINDOW_STATE = WindowState(*WINDOW_DEFAULT_SIZE)


def load_window_state(host) -> Optional[WindowState]:
    return WindowState.parse(host.get_ext_state(EXT_SECTION, EXT_WINDOW_STATE))


def save_window_state(host, state: WindowState) -> WindowState:
    """Persist state. A docked window keeps the undocked size saved before it."""
    if state.is_docked:
        previous = load_window_state(host)
        if previous:
            state = replace(state, width=previous.width, height=previous.height)

    host.set_ext_state(EXT_SECTION, EXT_WINDOW_STATE, state.format(), True)
    return state
