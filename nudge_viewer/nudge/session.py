"""
Viewer Session
All state of the nudge settings viewer: the slot on display, the edit
tracker and the exit flag. Widgets read from it and forward input to it.
"""

import re

from nudge_viewer.config import (
    KEY_0,
    KEY_8,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    LAST_SLOT,
    REAPACK_NOT_OWNED_MESSAGE,
    REAPACK_REQUIRED_MESSAGE,
    SCRIPT_NAME,
)
from nudge_viewer.utils.logger import logger
from .actions import NUDGE_LEFT, NUDGE_RIGHT, action_for
from .codec import NudgePreset, check_slot, read_preset
from .sync_tracker import PresetSyncTracker


def script_name(path: str) -> str:
    """Display name from a script path: text after the last '_' minus extension."""
    match = re.search(r"([^/\\_]+)\.\w+$", path or "")
    if match:
        return match.group(1)
    return SCRIPT_NAME


class ViewerSession:
    """
    Usage:
        session = ViewerSession(host, IniConfigStore(host.ini_file()))
        while session.tick():
            redraw(session.preset)
    """

    def __init__(self, host, store, tracker: PresetSyncTracker = None,
                 slot: int = LAST_SLOT):
        self.host = host
        self.store = store
        self.tracker = tracker or PresetSyncTracker(host)
        self.exit_requested = False
        self.name = script_name(host.script_path())
        self.preset: NudgePreset = read_preset(store, check_slot(slot))

    @property
    def slot(self) -> int:
        return self.preset.slot

    @property
    def is_editing(self) -> bool:
        return self.tracker.is_editing

    # === Slots ===

    def select_slot(self, slot: int, reload: bool = False):
        """Show a slot. Re-reads only when switching or when reload is set."""
        check_slot(slot)
        if slot == self.preset.slot and not reload:
            return
        self.preset = read_preset(self.store, slot)
        logger.slot(slot, "loaded", details=f"{self.preset.mode_label} {self.preset.target_label}")

    def reload(self):
        self.select_slot(self.preset.slot, reload=True)

    # === Actions ===

    def nudge_left(self):
        self.host.main_on_command(action_for(self.preset.slot, NUDGE_LEFT))

    def nudge_right(self):
        self.host.main_on_command(action_for(self.preset.slot, NUDGE_RIGHT))

    def edit_current(self) -> bool:
        return self.tracker.request_edit(self.preset.slot)

    def help(self):
        """Open the package's about dialog in ReaPack, if it is available."""
        if not self.host.has_reapack():
            self.host.show_message(REAPACK_REQUIRED_MESSAGE, self.name)
            return

        owner = self.host.reapack_owner(self.host.script_path())
        if not owner:
            self.host.show_message(
                REAPACK_NOT_OWNED_MESSAGE.format(name=self.name), self.name)
            return

        self.host.reapack_about(owner)
        self.host.reapack_free(owner)

    def request_exit(self):
        self.exit_requested = True

    # === Loop ===

    def handle_key(self, key: int) -> bool:
        """Dispatch a key press. Returns True when the key was used."""
        if KEY_0 <= key <= KEY_8:
            self.select_slot(key - KEY_0)
        elif key == KEY_LEFT:
            self.nudge_left()
        elif key == KEY_RIGHT:
            self.nudge_right()
        elif key == KEY_SPACE:
            self.edit_current()
        elif key == KEY_ESCAPE:
            self.request_exit()
        else:
            return False
        return True

    def tick(self) -> bool:
        """One poll of the host loop. Returns False once the viewer should close."""
        slot = self.tracker.poll()
        if slot is not None:
            self.select_slot(slot, reload=True)
        return not self.exit_requested
