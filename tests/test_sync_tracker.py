"""
Tests for PresetSyncTracker.

Covers:
- IDLE -> EDITING on request_edit, with bank promotion
- EDITING stays while the dialog is open
- EDITING -> IDLE on close, with exactly one save
- Re-entrancy: requests while editing are ignored
"""

import pytest

from nudge_viewer.config import NUDGE_DIALOG_ACTION
from nudge_viewer.nudge import (
    NUDGE_RIGHT,
    SAVE,
    EditSession,
    PresetSyncTracker,
    TrackerState,
    action_for,
)


@pytest.fixture
def tracker(host):
    return PresetSyncTracker(host)


def close_dialog(host):
    host.set_toggle(NUDGE_DIALOG_ACTION, 0)


class TestInitialState:

    def test_starts_idle(self, tracker):
        assert tracker.state is TrackerState.IDLE
        assert tracker.session is None
        assert tracker.is_editing is False

    def test_poll_while_idle_does_nothing(self, host, tracker):
        assert tracker.poll() is None
        assert host.commands == []

    def test_native_dialog_opened_while_idle_is_ignored(self, host, tracker):
        host.set_toggle(NUDGE_DIALOG_ACTION, 1)
        assert tracker.poll() is None
        assert tracker.state is TrackerState.IDLE
        close_dialog(host)
        assert tracker.poll() is None
        assert host.commands == []


class TestRequestEdit:

    def test_edit_last_slot_opens_dialog_only(self, host, tracker):
        assert tracker.request_edit(0) is True
        assert host.commands == [NUDGE_DIALOG_ACTION]
        assert tracker.state is TrackerState.EDITING
        assert tracker.session == EditSession(is_open=True, target_slot=0)

    def test_edit_bank_slot_promotes_first(self, host, tracker):
        tracker.request_edit(3)
        assert host.commands == [action_for(3, NUDGE_RIGHT), NUDGE_DIALOG_ACTION]
        assert tracker.session.target_slot == 3

    def test_promotion_runs_with_empty_selection(self, host, tracker):
        host.add_items("a", "b", "c")
        tracker.request_edit(6)
        # Nudge ran with nothing selected...
        assert host.selection_at_command[0] == ()
        # ...and the selection is back afterwards
        assert host.selected_items() == ["a", "b", "c"]

    def test_unselected_items_stay_unselected(self, host, tracker):
        host.add_items("a")
        host.add_items("b", selected=False)
        tracker.request_edit(2)
        assert host.selected_items() == ["a"]

    def test_request_while_editing_is_noop(self, host, tracker):
        tracker.request_edit(3)
        commands = list(host.commands)
        for slot in range(9):
            assert tracker.request_edit(slot) is False
            assert tracker.session.target_slot == 3
        assert host.commands == commands

    def test_request_with_dialog_already_open_is_refused(self, host, tracker):
        host.set_toggle(NUDGE_DIALOG_ACTION, 1)
        assert tracker.request_edit(1) is False
        assert tracker.state is TrackerState.IDLE
        assert host.commands == []

    def test_invalid_slot(self, tracker):
        with pytest.raises(ValueError):
            tracker.request_edit(9)


class TestPoll:

    def test_still_open_stays_editing(self, host, tracker):
        tracker.request_edit(3)
        for _ in range(5):
            assert tracker.poll() is None
        assert tracker.state is TrackerState.EDITING
        assert tracker.session.target_slot == 3

    def test_close_saves_once_and_returns_slot(self, host, tracker):
        tracker.request_edit(3)
        tracker.poll()
        close_dialog(host)
        before = len(host.commands)

        assert tracker.poll() == 3
        assert host.commands[before:] == [action_for(3, SAVE)]
        assert tracker.state is TrackerState.IDLE
        assert tracker.session is None

        # Nothing more on later polls
        assert tracker.poll() is None
        assert len(host.commands) == before + 1

    @pytest.mark.parametrize("slot,save_id", [(0, 0), (1, 41271), (5, 41283), (8, 41286)])
    def test_save_action_per_slot(self, host, tracker, slot, save_id):
        tracker.request_edit(slot)
        close_dialog(host)
        assert tracker.poll() == slot
        assert host.commands[-1] == save_id

    def test_can_edit_again_after_close(self, host, tracker):
        tracker.request_edit(1)
        close_dialog(host)
        tracker.poll()
        assert tracker.request_edit(2) is True
        assert tracker.session.target_slot == 2
