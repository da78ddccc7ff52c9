"""Pytest configuration - headless Qt and shared fixtures."""
from __future__ import annotations

import os
import pytest

# GUI tests never need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# Fixtures used by multiple test files

@pytest.fixture
def host():
    """In-memory host whose nudge dialog starts closed."""
    from nudge_viewer.config import NUDGE_DIALOG_ACTION
    from nudge_viewer.host import MemoryHost

    h = MemoryHost(dialog_action=NUDGE_DIALOG_ACTION)
    h.set_toggle(NUDGE_DIALOG_ACTION, 0)
    return h


@pytest.fixture
def store():
    """Config store with a few known slots.

    slot 0: nudge position by 10 milliseconds
    slot 3: set edit cursor, measures.beats, snap + relative
    slot 5: nudge right trim by 0.5 notes 1/16, snap
    """
    from nudge_viewer.host import MemoryConfigStore

    return MemoryConfigStore({
        "nudge": 0x0000,
        "nudgeamt": 10,
        "nudge_3": (6 << 12) | (16 << 4) | 0x7,
        "nudgeamt_3": 99,
        "nudge_5": (3 << 12) | (9 << 4) | 0x2,
        "nudgeamt_5": 0.5,
    })


@pytest.fixture
def session(host, store):
    from nudge_viewer.nudge import ViewerSession
    return ViewerSession(host, store)
