"""
Action id lookup for nudge slots.

REAPER numbers its per-slot nudge actions in groups: one action for the last
used settings, then two runs of four consecutive ids for banks 1-4 and 5-8.
"""

from dataclasses import dataclass
from typing import Dict

from nudge_viewer.config import (
    BANK_SIZE,
    LAST_SLOT,
    NUDGE_LEFT_ACTIONS,
    NUDGE_RIGHT_ACTIONS,
    SAVE_ACTIONS,
)
from .codec import check_slot


@dataclass(frozen=True)
class ActionGroup:
    last: int
    bank1: int
    bank2: int

    @classmethod
    def from_dict(cls, ids: Dict[str, int]) -> "ActionGroup":
        return cls(last=ids['last'], bank1=ids['bank1'], bank2=ids['bank2'])


SAVE = ActionGroup.from_dict(SAVE_ACTIONS)
NUDGE_LEFT = ActionGroup.from_dict(NUDGE_LEFT_ACTIONS)
NUDGE_RIGHT = ActionGroup.from_dict(NUDGE_RIGHT_ACTIONS)


def group_name(slot: int) -> str:
    """'last', 'bank1' (slots 1-4) or 'bank2' (slots 5-8)."""
    check_slot(slot)
    if slot == LAST_SLOT:
        return 'last'
    if slot <= BANK_SIZE:
        return 'bank1'
    return 'bank2'


def action_for(slot: int, group: ActionGroup) -> int:
    """Resolve the command id of a group's action for a slot."""
    name = group_name(slot)
    if name == 'last':
        return group.last
    return getattr(group, name) + (slot - 1) % BANK_SIZE
