"""
Reusable UI Widgets
Atomic components with no business logic - just behavior
"""

from PyQt5.QtWidgets import QLabel, QPushButton
from PyQt5.QtCore import Qt

from .theme import box_style, button_style


class ValueBox(QLabel):
    """
    Read-only box showing one decoded field.
    Fixed width when given, otherwise sized to its text.
    """

    def __init__(self, text="", width=None, border=True, parent=None):
        super().__init__(text, parent)
        self.setStyleSheet(box_style(border))
        self.setAlignment(Qt.AlignCenter if border else Qt.AlignLeft | Qt.AlignVCenter)
        self.setFocusPolicy(Qt.NoFocus)
        if width:
            self.setFixedWidth(width)

    def set_text(self, text):
        if self.text() != text:
            self.setText(text)


class ToggleButton(QPushButton):
    """Push button highlighted while its `active` state is set."""

    def __init__(self, text, parent=None):
        super().__init__(text, parent)
        self._active = None
        # Keys go to the window, not to whichever button was last clicked
        self.setFocusPolicy(Qt.NoFocus)
        self.set_active(False)

    def set_active(self, active):
        active = bool(active)
        if active != self._active:
            self._active = active
            self.setStyleSheet(button_style(active))

    def is_active(self):
        return bool(self._active)
