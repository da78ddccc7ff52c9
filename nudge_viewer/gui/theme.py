"""
Theme - Centralized color and style definitions
All widgets reference this for consistent styling

Loads from active skin in gui/skins/
"""
from .skins import active as skin


def get(key, default='#ff00ff'):
    """Get value from active skin. Magenta = missing key."""
    return skin.SKIN.get(key, default)


FONT_FAMILY = get('font_family')

COLORS = {
    'background': get('bg_window'),
    'box': get('bg_box'),
    'border': get('border'),
    'text': get('text'),
    'button': get('button_bg'),
    'button_hover': get('button_hover'),
    'button_pressed': get('button_pressed'),
    'button_active': get('button_active'),
}


# =============================================================================
# STYLE FUNCTIONS
# =============================================================================

def button_style(active=False):
    """Slot/toolbar button stylesheet; active = the selected slot or a running edit."""
    bg = COLORS['button_active'] if active else COLORS['button']
    hover = COLORS['button_active'] if active else COLORS['button_hover']
    return f"""
        QPushButton {{
            background-color: {bg};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            padding: 3px 7px;
        }}
        QPushButton:hover {{
            background-color: {hover};
        }}
        QPushButton:pressed {{
            background-color: {COLORS['button_pressed']};
        }}
    """


def box_style(border=True):
    """Read-only value box stylesheet."""
    edge = f"1px solid {COLORS['border']}" if border else "none"
    return f"""
        QLabel {{
            background-color: {COLORS['box']};
            color: {COLORS['text']};
            border: {edge};
            padding: 3px 7px;
        }}
    """
