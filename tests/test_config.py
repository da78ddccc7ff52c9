"""
Tests for nudge_viewer/config/__init__.py
Validates constants, tables and key codes
"""

import pytest
from nudge_viewer.config import (
    KEY_0,
    KEY_8,
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SPACE,
    NOTE_NAMES,
    NUM_SLOTS,
    SLOT_LABELS,
    TARGET_NAMES,
    UNIT_NAMES,
)


class TestTables:

    def test_eight_targets(self):
        assert sorted(TARGET_NAMES) == list(range(1, 9))

    def test_unit_table(self):
        assert sorted(UNIT_NAMES) == [1, 2, 3, 4, 17, 18, 19, 20, 21, 22]

    def test_thirteen_notes(self):
        assert sorted(NOTE_NAMES) == list(range(1, 14))
        assert NOTE_NAMES[1] == '1/256'
        assert NOTE_NAMES[13] == 'whole'

    def test_slot_labels(self):
        assert len(SLOT_LABELS) == NUM_SLOTS == 9
        assert SLOT_LABELS[0] == 'Last'
        assert SLOT_LABELS[8] == '8'


class TestKeyCodes:
    """Key codes must match Qt's so window key events can be forwarded as-is."""

    def test_match_qt(self):
        QtCore = pytest.importorskip("PyQt5.QtCore")
        Qt = QtCore.Qt
        assert KEY_0 == Qt.Key_0
        assert KEY_8 == Qt.Key_8
        assert KEY_SPACE == Qt.Key_Space
        assert KEY_ESCAPE == Qt.Key_Escape
        assert KEY_LEFT == Qt.Key_Left
        assert KEY_RIGHT == Qt.Key_Right
