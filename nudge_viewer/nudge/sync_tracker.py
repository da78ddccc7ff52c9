"""
Preset Sync Tracker
Follows the native nudge dialog while it edits one of the slots.

The native dialog only ever edits the "last" settings. To edit a bank slot
its values are first promoted into "last", and once the dialog closes the
last settings are saved back into the slot.

State machine:
    IDLE     - No edit in progress.
    EDITING  - The native dialog was opened for `session.target_slot`.

    IDLE    -> EDITING  request_edit(slot)
    EDITING -> EDITING  poll(), dialog still open
    EDITING -> IDLE     poll(), dialog closed: save action runs, slot returned

Host calls are fire-and-forget, matching REAPER's own action API.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from nudge_viewer.config import LAST_SLOT, NUDGE_DIALOG_ACTION
from nudge_viewer.utils.logger import logger
from .actions import NUDGE_RIGHT, SAVE, action_for
from .codec import check_slot


class TrackerState(Enum):
    IDLE = auto()
    EDITING = auto()


@dataclass(frozen=True)
class EditSession:
    """The single edit in progress in the shared native dialog."""
    is_open: bool
    target_slot: int


class PresetSyncTracker:
    """
    Usage:
        tracker = PresetSyncTracker(host)
        tracker.request_edit(3)

        # once per tick
        slot = tracker.poll()
        if slot is not None:
            preset = read_preset(store, slot)
    """

    def __init__(self, host, dialog_action: int = NUDGE_DIALOG_ACTION):
        self.host = host
        self.dialog_action = dialog_action
        self._session: Optional[EditSession] = None

    @property
    def session(self) -> Optional[EditSession]:
        return self._session

    @property
    def state(self) -> TrackerState:
        return TrackerState.EDITING if self._session else TrackerState.IDLE

    @property
    def is_editing(self) -> bool:
        return self._session is not None

    def dialog_open(self) -> bool:
        return self.host.toggle_state(self.dialog_action) == 1

    def request_edit(self, slot: int) -> bool:
        """Open the native dialog on a slot. Returns False if ignored."""
        check_slot(slot)
        if self._session is not None:
            logger.debug(f"Already editing slot {self._session.target_slot}",
                         component="SYNC")
            return False

        if self.dialog_open():
            # Toggling again would close the dialog the user opened natively
            logger.info("Nudge dialog is already open", component="SYNC")
            return False

        if slot != LAST_SLOT:
            self._promote_to_last(slot)

        self.host.main_on_command(self.dialog_action)
        self._session = EditSession(is_open=True, target_slot=slot)
        logger.slot(slot, "editing in native dialog")
        return True

    def poll(self) -> Optional[int]:
        """
        Check the dialog once.

        Returns:
            The edited slot when the dialog has just closed (its settings have
            been saved and should be decoded again), otherwise None.
        """
        if self._session is None or self.dialog_open():
            return None

        slot = self._session.target_slot
        self.host.main_on_command(action_for(slot, SAVE))
        self._session = None
        logger.info(f"Saved nudge settings to slot {slot}", component="SYNC")
        return slot

    def _promote_to_last(self, slot: int):
        """
        Make a bank slot the last used settings by nudging with it while
        nothing is selected, then restore the selection.
        """
        selection = list(self.host.selected_items())
        for item in selection:
            self.host.set_item_selected(item, False)

        self.host.main_on_command(action_for(slot, NUDGE_RIGHT))

        for item in selection:
            self.host.set_item_selected(item, True)
