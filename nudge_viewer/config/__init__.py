"""
Central Configuration
All constants, mappings, and settings in one place
"""

import os

# === NUDGE SLOTS ===
# Slot 0 is REAPER's "last used" nudge settings, 1-8 are the saved banks
LAST_SLOT = 0
NUM_SLOTS = 9
SLOT_LABELS = ['Last'] + [str(i) for i in range(1, NUM_SLOTS)]

# === REAPER.INI KEYS ===
INI_SECTION = 'REAPER'
INI_KEY_NUDGE = 'nudge'
INI_KEY_AMOUNT = 'nudgeamt'

# === DECODE TABLES ===
# Keys are the 1-based values REAPER packs into the nudge word
TARGET_NAMES = {
    1: 'position',
    2: 'left trim',
    3: 'left edge',
    4: 'right trim',
    5: 'contents',
    6: 'duplicate',
    7: 'edit cursor',
    8: 'end position',
}

UNIT_NOTES = 4
UNIT_MEASURES_BEATS = 17

UNIT_NAMES = {
    1: 'milliseconds',
    2: 'seconds',
    3: 'grid units',
    UNIT_NOTES: 'notes',
    UNIT_MEASURES_BEATS: 'measures.beats',
    18: 'samples',
    19: 'frames',
    20: 'pixels',
    21: 'item lengths',
    22: 'item selections',
}

# Raw unit values 4..16 are note lengths, stored as note index 1..13
NOTE_UNIT_RANGE = (4, 16)

NOTE_NAMES = {
    i + 1: name for i, name in enumerate([
        '1/256', '1/128', '1/64', '1/32T', '1/32', '1/16T', '1/16',
        '1/8T', '1/8', '1/4T', '1/4', '1/2', 'whole',
    ])
}

# Units whose "snap" option snaps to the grid, and to bars
SNAP_GRID_UNITS = (3, 21, 22)
SNAP_BAR_UNITS = (UNIT_MEASURES_BEATS,)

# Targets that expose the "relative set" option in Set mode
RELATIVE_SET_TARGETS = (1, 6, 8)  # position, duplicate, end position

NOT_APPLICABLE_LABEL = '(N/A)'

# === ACTION IDS ===
# Native "Nudge/set items" dialog (also a toggle we poll)
NUDGE_DIALOG_ACTION = 41228

# Per-group action ids: 'last' is a single action, banks are 4 consecutive ids
SAVE_ACTIONS = {'last': 0, 'bank1': 41271, 'bank2': 41283}
NUDGE_LEFT_ACTIONS = {'last': 41250, 'bank1': 41279, 'bank2': 41291}
NUDGE_RIGHT_ACTIONS = {'last': 41249, 'bank1': 41275, 'bank2': 41287}
BANK_SIZE = 4

# === EXTENSION STATE ===
EXT_SECTION = 'cfillion_show_nudge_settings'
EXT_WINDOW_STATE = 'windowState'

# === WINDOW ===
SCRIPT_NAME = 'Show all saved nudge settings'
WINDOW_DEFAULT_SIZE = (475, 97)
WIN_PADDING = 10
BOX_PADDING = 7

FONT_SIZE_MAC = 12
FONT_SIZE_DEFAULT = 15

SIZES = {
    'box_mode': 70,
    'box_target': 100,
    'box_amount': 70,
    'box_note': 50,
}

# === POLLING ===
# Host loop tick, REAPER's own defer loop runs at roughly 30Hz
POLL_INTERVAL_MS = int(os.environ.get('NV_POLL_MS', '33'))

# === REAPACK ===
REAPACK_REQUIRED_MESSAGE = 'This feature requires ReaPack v1.2 or newer.'
REAPACK_NOT_OWNED_MESSAGE = (
    'This feature is unavailable because "{name}" was not installed using ReaPack.'
)

# === KEYBOARD ===
# Qt::Key codes, kept here so the session logic does not import Qt
KEY_0 = 0x30
KEY_8 = 0x38
KEY_SPACE = 0x20
KEY_ESCAPE = 0x01000000
KEY_LEFT = 0x01000012
KEY_RIGHT = 0x01000014
