"""
Tests for slot to action id mapping.
"""

import pytest

from nudge_viewer.nudge import (
    ActionGroup,
    NUDGE_LEFT,
    NUDGE_RIGHT,
    SAVE,
    action_for,
    group_name,
)


class TestGroupName:

    def test_last(self):
        assert group_name(0) == 'last'

    @pytest.mark.parametrize("slot", [1, 2, 3, 4])
    def test_bank1(self, slot):
        assert group_name(slot) == 'bank1'

    @pytest.mark.parametrize("slot", [5, 6, 7, 8])
    def test_bank2(self, slot):
        assert group_name(slot) == 'bank2'

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            group_name(9)


class TestActionFor:

    GROUP = ActionGroup(last=100, bank1=200, bank2=300)

    def test_last_slot(self):
        assert action_for(0, self.GROUP) == 100

    def test_bank1_offsets(self):
        assert [action_for(s, self.GROUP) for s in range(1, 5)] == [200, 201, 202, 203]

    def test_bank2_offsets(self):
        assert [action_for(s, self.GROUP) for s in range(5, 9)] == [300, 301, 302, 303]

    def test_reaper_save_actions(self):
        assert action_for(0, SAVE) == 0
        assert action_for(1, SAVE) == 41271
        assert action_for(4, SAVE) == 41274
        assert action_for(5, SAVE) == 41283
        assert action_for(8, SAVE) == 41286

    def test_reaper_nudge_actions(self):
        assert action_for(0, NUDGE_LEFT) == 41250
        assert action_for(0, NUDGE_RIGHT) == 41249
        assert action_for(3, NUDGE_LEFT) == 41281
        assert action_for(3, NUDGE_RIGHT) == 41277
        assert action_for(6, NUDGE_LEFT) == 41292
        assert action_for(6, NUDGE_RIGHT) == 41288

    def test_from_dict(self):
        group = ActionGroup.from_dict({'last': 1, 'bank1': 2, 'bank2': 3})
        assert group == ActionGroup(1, 2, 3)
