"""
Nudge Settings Codec
Packs/unpacks REAPER's nudge configuration word into a NudgePreset.

Bit layout of the `nudge` / `nudge_N` keys in reaper.ini:

    bit 0       mode (0 = nudge, 1 = set)
    bit 1       snap
    bit 2       relative set
    bits 4-11   unit, 0-based (4..16 once made 1-based are note lengths)
    bits 12+    target, 0-based

Unknown table values decode to "N (Unknown)" labels instead of failing so
newer REAPER versions stay readable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from nudge_viewer.config import (
    INI_KEY_AMOUNT,
    INI_KEY_NUDGE,
    NOT_APPLICABLE_LABEL,
    NOTE_NAMES,
    NOTE_UNIT_RANGE,
    NUM_SLOTS,
    RELATIVE_SET_TARGETS,
    SNAP_BAR_UNITS,
    SNAP_GRID_UNITS,
    TARGET_NAMES,
    UNIT_NAMES,
    UNIT_NOTES,
)

MODE_BIT = 0x1
SNAP_BIT = 0x2
RELATIVE_BIT = 0x4
UNIT_SHIFT = 4
UNIT_MASK = 0xFF
TARGET_SHIFT = 12


class NudgeMode(Enum):
    NUDGE = 0
    SET = 1


class _NotApplicable:
    """Amount marker for Set mode, REAPER never stores a value for it."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NOT_APPLICABLE"

    def __str__(self):
        return NOT_APPLICABLE_LABEL

    def __bool__(self):
        return False


NOT_APPLICABLE = _NotApplicable()

Amount = Union[float, _NotApplicable]


def map_value(value: int, table: Dict[int, str]) -> str:
    """Look up a 1-based table value, labelling anything unknown."""
    return table.get(value, "%d (Unknown)" % value)


def on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"


def format_amount(amount: Amount) -> str:
    if amount is NOT_APPLICABLE:
        return NOT_APPLICABLE_LABEL
    return "%.14g" % amount


def check_slot(slot: int) -> int:
    if not 0 <= slot < NUM_SLOTS:
        raise ValueError(f"slot must be in 0..{NUM_SLOTS - 1}, got {slot}")
    return slot


@dataclass(frozen=True)
class NudgePreset:
    """One decoded nudge setting slot. Replaced wholesale, never mutated."""
    slot: int
    mode: NudgeMode
    target: int             # 1-based, see TARGET_NAMES
    unit: int               # 1-based, see UNIT_NAMES (4 = notes)
    note: Optional[int]     # 1-based, see NOTE_NAMES; only when unit is notes
    snap: bool
    relative: bool
    amount: Amount

    @property
    def is_set_mode(self) -> bool:
        return self.mode is NudgeMode.SET

    @property
    def mode_label(self) -> str:
        return "Set" if self.is_set_mode else "Nudge"

    @property
    def amount_prefix(self) -> str:
        return "to:" if self.is_set_mode else "by:"

    @property
    def amount_label(self) -> str:
        return format_amount(self.amount)

    @property
    def target_label(self) -> str:
        return map_value(self.target, TARGET_NAMES)

    @property
    def unit_label(self) -> str:
        return map_value(self.unit, UNIT_NAMES)

    @property
    def note_label(self) -> Optional[str]:
        if self.note is None:
            return None
        return map_value(self.note, NOTE_NAMES)

    @property
    def snap_target(self) -> str:
        if self.unit in SNAP_GRID_UNITS:
            return "grid"
        if self.unit in SNAP_BAR_UNITS:
            return "bar"
        return "unit"

    @property
    def snap_label(self) -> str:
        return f"Snap to {self.snap_target}: {on_off(self.snap)}"

    @property
    def shows_relative(self) -> bool:
        """Relative set only applies to some targets in Set mode."""
        return self.is_set_mode and self.target in RELATIVE_SET_TARGETS

    @property
    def relative_label(self) -> str:
        return f"Relative set: {on_off(self.relative)}"


def decode(slot: int, raw_config_word: int, raw_amount_word: float = 0.0) -> NudgePreset:
    """
    Decode a packed nudge word (plus its amount) into a NudgePreset.

    Args:
        slot: 0 for the last used settings, 1-8 for saved banks
        raw_config_word: value of the `nudge` key
        raw_amount_word: value of the `nudgeamt` key, ignored in Set mode

    Returns:
        NudgePreset with every field populated
    """
    check_slot(slot)
    word = int(raw_config_word)

    mode = NudgeMode.SET if word & MODE_BIT else NudgeMode.NUDGE
    target = (word >> TARGET_SHIFT) + 1
    unit = ((word >> UNIT_SHIFT) & UNIT_MASK) + 1

    note = None
    low, high = NOTE_UNIT_RANGE
    if low <= unit <= high:
        note = unit - 3
        unit = UNIT_NOTES

    if mode is NudgeMode.NUDGE:
        amount = float(raw_amount_word)
    else:
        amount = NOT_APPLICABLE

    return NudgePreset(
        slot=slot,
        mode=mode,
        target=target,
        unit=unit,
        note=note,
        snap=bool(word & SNAP_BIT),
        relative=bool(word & RELATIVE_BIT),
        amount=amount,
    )


def encode(preset: NudgePreset) -> int:
    """Pack a NudgePreset back into REAPER's nudge word."""
    unit = preset.unit
    if preset.note is not None:
        unit = preset.note + 3

    word = preset.mode.value
    if preset.snap:
        word |= SNAP_BIT
    if preset.relative:
        word |= RELATIVE_BIT
    word |= ((unit - 1) & UNIT_MASK) << UNIT_SHIFT
    word |= (preset.target - 1) << TARGET_SHIFT
    return word


def read_preset(store, slot: int) -> NudgePreset:
    """Read and decode a slot from a configuration store."""
    check_slot(slot)
    word = store.read_int(INI_KEY_NUDGE, slot)
    amount = 0.0
    if not word & MODE_BIT:
        amount = store.read_float(INI_KEY_AMOUNT, slot)
    return decode(slot, word, amount)
