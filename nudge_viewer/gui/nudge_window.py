"""
Nudge Settings Window
Shows every saved nudge setting in a single window.

    [Last] [1] ... [8]                              [Edit] [?]
    [Nudge] [position] by: [10] [milliseconds                ]
    Snap to unit: OFF                [< Nudge left] [Nudge right >]

Edit opens REAPER's native nudge dialog with the selected settings filled;
they are saved back into the slot once the dialog closes.

Keyboard: 0-8 select a slot, Space edits, Left/Right nudge, Escape closes.

Caveats:
- The "Last" tab can lag behind the effective last nudge settings: REAPER
  does not write them to reaper.ini when a "Nudge left/right by saved nudge
  dialog settings N" action changes them. Opening and closing the native
  dialog forces a save.
- REAPER does not store an amount in Set mode, shown as "(N/A)".
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout
from PyQt5.QtCore import QTimer
from PyQt5.QtGui import QFont

from nudge_viewer.config import (
    BOX_PADDING,
    FONT_SIZE_DEFAULT,
    FONT_SIZE_MAC,
    NUM_SLOTS,
    POLL_INTERVAL_MS,
    SIZES,
    SLOT_LABELS,
    WIN_PADDING,
)
from nudge_viewer.host.window_state import (
    DEFAULT_WINDOW_STATE,
    WindowState,
    load_window_state,
    save_window_state,
)
from nudge_viewer.utils.logger import logger
from .theme import COLORS, FONT_FAMILY
from .widgets import ToggleButton, ValueBox

LAST_TAB_TOOLTIP = (
    "Last used nudge settings.\n"
    "May be out of sync: REAPER does not save them when a\n"
    "\"Nudge by saved nudge dialog settings\" action changes them.\n"
    "Open and close the native nudge dialog to force a save."
)
SET_AMOUNT_TOOLTIP = "REAPER does not store the amount in Set mode"


def font_size_for(app_version: str) -> int:
    """REAPER's macOS builds render text larger, so use a smaller size there."""
    if "OSX" in app_version or "macOS" in app_version:
        return FONT_SIZE_MAC
    return FONT_SIZE_DEFAULT


class NudgeSettingsWindow(QWidget):
    """Polls the session on a timer and redraws from it."""

    def __init__(self, session, poll_interval_ms=POLL_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self.session = session
        self.setWindowTitle(session.name)
        self.setStyleSheet(f"background-color: {COLORS['background']};")
        self.setFont(QFont(FONT_FAMILY, font_size_for(session.host.app_version())))

        self.setup_ui()
        self._restore_geometry()

        self.timer = QTimer(self)
        self.timer.setInterval(poll_interval_ms)
        self.timer.timeout.connect(self.on_tick)

        self.refresh()

    def setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(WIN_PADDING, WIN_PADDING, WIN_PADDING, WIN_PADDING)
        layout.setSpacing(4)

        # Slot tabs + edit/help
        top = QHBoxLayout()
        top.setSpacing(BOX_PADDING)
        self.slot_buttons = []
        for slot in range(NUM_SLOTS):
            btn = ToggleButton(SLOT_LABELS[slot])
            btn.clicked.connect(lambda checked, s=slot: self.on_slot_clicked(s))
            self.slot_buttons.append(btn)
            top.addWidget(btn)
        self.slot_buttons[0].setToolTip(LAST_TAB_TOOLTIP)
        top.addStretch()

        self.edit_btn = ToggleButton("Edit")
        self.edit_btn.setToolTip("Edit in the native nudge dialog (Space)")
        self.edit_btn.clicked.connect(self.on_edit_clicked)
        top.addWidget(self.edit_btn)

        self.help_btn = ToggleButton("?")
        self.help_btn.clicked.connect(self.session.help)
        top.addWidget(self.help_btn)
        layout.addLayout(top)

        # Decoded settings
        values = QHBoxLayout()
        values.setSpacing(BOX_PADDING)
        self.mode_box = ValueBox(width=SIZES['box_mode'])
        self.target_box = ValueBox(width=SIZES['box_target'])
        self.prefix_box = ValueBox(border=False)
        self.amount_box = ValueBox(width=SIZES['box_amount'])
        self.note_box = ValueBox(width=SIZES['box_note'])
        self.unit_box = ValueBox()
        for box in (self.mode_box, self.target_box, self.prefix_box,
                    self.amount_box, self.note_box):
            values.addWidget(box)
        values.addWidget(self.unit_box, 1)
        layout.addLayout(values)

        # Options + nudge buttons
        bottom = QHBoxLayout()
        bottom.setSpacing(BOX_PADDING)
        self.snap_box = ValueBox(border=False)
        self.relative_box = ValueBox(border=False)
        bottom.addWidget(self.snap_box)
        bottom.addWidget(self.relative_box)
        bottom.addStretch()

        self.left_btn = ToggleButton("< Nudge left")
        self.left_btn.clicked.connect(self.on_nudge_left)
        bottom.addWidget(self.left_btn)
        self.right_btn = ToggleButton("Nudge right >")
        self.right_btn.clicked.connect(self.on_nudge_right)
        bottom.addWidget(self.right_btn)
        layout.addLayout(bottom)

    # === Drawing ===

    def refresh(self):
        """Redraw everything from the session."""
        preset = self.session.preset

        for slot, btn in enumerate(self.slot_buttons):
            btn.set_active(slot == preset.slot)
        self.edit_btn.set_active(self.session.is_editing)

        self.mode_box.set_text(preset.mode_label)
        self.target_box.set_text(preset.target_label)
        self.prefix_box.set_text(preset.amount_prefix)
        self.amount_box.set_text(preset.amount_label)
        self.amount_box.setToolTip(SET_AMOUNT_TOOLTIP if preset.is_set_mode else "")

        note = preset.note_label
        self.note_box.setVisible(note is not None)
        if note is not None:
            self.note_box.set_text(note)
        self.unit_box.set_text(preset.unit_label)

        self.snap_box.set_text(preset.snap_label)
        self.relative_box.setVisible(preset.shows_relative)
        self.relative_box.set_text(preset.relative_label)

    # === Input ===

    def on_slot_clicked(self, slot):
        self.session.select_slot(slot)
        self.refresh()

    def on_edit_clicked(self):
        self.session.edit_current()
        self.refresh()

    def on_nudge_left(self):
        self.session.nudge_left()

    def on_nudge_right(self):
        self.session.nudge_right()

    def keyPressEvent(self, event):
        if self.session.handle_key(event.key()):
            if self.session.exit_requested:
                self.close()
            else:
                self.refresh()
        else:
            super().keyPressEvent(event)

    # === Host loop ===

    def on_tick(self):
        if not self.session.tick():
            self.close()
            return
        self.refresh()

    def showEvent(self, event):
        super().showEvent(event)
        if not self.timer.isActive():
            self.timer.start()

    def closeEvent(self, event):
        """Stop polling and remember the geometry."""
        self.timer.stop()
        self._save_geometry()
        super().closeEvent(event)

    # === Window settings persistence ===

    def _restore_geometry(self):
        state = load_window_state(self.session.host)
        if state is None:
            state = DEFAULT_WINDOW_STATE
            self.resize(state.width, state.height)
            return
        self.resize(state.width, state.height)
        self.move(state.x, state.y)
        logger.debug(f"Restored window {state.format()}", component="GUI")

    def _save_geometry(self):
        # Qt windows never dock into REAPER
        state = WindowState(self.width(), self.height(), 0, self.x(), self.y())
        save_window_state(self.session.host, state)
