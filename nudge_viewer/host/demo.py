"""
Demo host - runs the viewer without REAPER.

Seeds a few nudge settings and emulates what REAPER does when the nudge,
save and dialog actions run, so every button does something visible.
"""

from nudge_viewer.config import (
    BANK_SIZE,
    INI_KEY_AMOUNT,
    INI_KEY_NUDGE,
    LAST_SLOT,
    NUDGE_DIALOG_ACTION,
    NUM_SLOTS,
)
from nudge_viewer.nudge.actions import NUDGE_LEFT, NUDGE_RIGHT, SAVE, action_for
from nudge_viewer.nudge.codec import NOT_APPLICABLE, NudgeMode, NudgePreset, encode, SNAP_BIT
from nudge_viewer.utils.logger import logger
from .base import MemoryHost
from .ini_store import MemoryConfigStore

DEMO_PRESETS = [
    # slot, mode, target, unit, note, snap, relative, amount
    (0, NudgeMode.NUDGE, 1, 1, None, False, False, 10.0),
    (1, NudgeMode.NUDGE, 1, 4, 7, True, False, 1.0),
    (2, NudgeMode.NUDGE, 4, 3, None, True, False, 1.0),
    (3, NudgeMode.SET, 7, 17, None, True, True, NOT_APPLICABLE),
    (4, NudgeMode.NUDGE, 6, 21, None, False, False, 2.0),
    (5, NudgeMode.SET, 1, 2, None, False, True, NOT_APPLICABLE),
    (6, NudgeMode.NUDGE, 5, 18, None, False, False, 480.0),
]


def _copy_slot(store: MemoryConfigStore, src: int, dst: int):
    for key in (INI_KEY_NUDGE, INI_KEY_AMOUNT):
        store.set(key, dst, store.read_float(key, src))


def make_demo_host():
    """Returns a (MemoryHost, MemoryConfigStore) pair wired together."""
    host = MemoryHost(dialog_action=NUDGE_DIALOG_ACTION)
    host.add_items("demo item 1", "demo item 2")
    host.set_toggle(NUDGE_DIALOG_ACTION, 0)

    store = MemoryConfigStore()
    for slot, *fields in DEMO_PRESETS:
        preset = NudgePreset(slot, *fields)
        store.set(INI_KEY_NUDGE, slot, encode(preset))
        if preset.amount is not NOT_APPLICABLE:
            store.set(INI_KEY_AMOUNT, slot, preset.amount)

    for slot in range(1, NUM_SLOTS):
        # Running a bank's nudge action makes it the last used settings
        for group in (NUDGE_LEFT, NUDGE_RIGHT):
            host.command_hooks[action_for(slot, group)] = (
                lambda s=slot: _copy_slot(store, s, LAST_SLOT))
        host.command_hooks[action_for(slot, SAVE)] = (
            lambda s=slot: _copy_slot(store, LAST_SLOT, s))

    def edit_in_dialog():
        # The "user" flips snap and closes the dialog straight away
        word = store.read_int(INI_KEY_NUDGE, LAST_SLOT)
        store.set(INI_KEY_NUDGE, LAST_SLOT, word ^ SNAP_BIT)
        host.set_toggle(NUDGE_DIALOG_ACTION, 0)

    host.command_hooks[NUDGE_DIALOG_ACTION] = edit_in_dialog
    logger.info(f"Demo host ready ({BANK_SIZE * 2} banks)", component="HOST")
    return host, store
