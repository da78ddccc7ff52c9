"""
Nudge module - decode nudge settings and follow edits in the native dialog.
"""

from .codec import (
    NOT_APPLICABLE,
    NudgeMode,
    NudgePreset,
    decode,
    encode,
    map_value,
    read_preset,
)

from .actions import (
    ActionGroup,
    NUDGE_LEFT,
    NUDGE_RIGHT,
    SAVE,
    action_for,
    group_name,
)

from .sync_tracker import (
    EditSession,
    PresetSyncTracker,
    TrackerState,
)

from .session import ViewerSession

__all__ = [
    "NOT_APPLICABLE",
    "NudgeMode",
    "NudgePreset",
    "decode",
    "encode",
    "map_value",
    "read_preset",
    "ActionGroup",
    "NUDGE_LEFT",
    "NUDGE_RIGHT",
    "SAVE",
    "action_for",
    "group_name",
    "EditSession",
    "PresetSyncTracker",
    "TrackerState",
    "ViewerSession",
]
