"""
Tests for the demo host used by --demo.
"""

from dataclasses import replace

from nudge_viewer.config import NUDGE_DIALOG_ACTION
from nudge_viewer.host.demo import make_demo_host
from nudge_viewer.nudge import NOT_APPLICABLE, ViewerSession, read_preset


class TestDemoHost:

    def test_seeded_presets(self):
        host, store = make_demo_host()
        assert read_preset(store, 1).note_label == '1/16'
        assert read_preset(store, 3).amount is NOT_APPLICABLE
        assert read_preset(store, 6).unit_label == 'samples'

    def test_nudge_makes_bank_the_last(self):
        host, store = make_demo_host()
        session = ViewerSession(host, store)
        session.select_slot(6)
        session.nudge_right()
        assert read_preset(store, 0) == replace(read_preset(store, 6), slot=0)

    def test_edit_round_trip(self):
        host, store = make_demo_host()
        session = ViewerSession(host, store)
        session.select_slot(2)
        snap_before = session.preset.snap

        session.edit_current()
        assert host.toggle_state(NUDGE_DIALOG_ACTION) == 0
        session.tick()

        assert session.slot == 2
        assert session.preset.snap is (not snap_before)
        assert not session.is_editing
        # Selection restored after promotion
        assert host.selected_items() == ["demo item 1", "demo item 2"]
