"""
Default Skin - Light

Matches REAPER's stock light script windows: white background, grey
buttons, blue for the active slot.
"""
import platform

SKIN = {
    # ==========================================================================
    # PALETTE
    # ==========================================================================

    'bg_window': '#ffffff',
    'bg_box': '#ffffff',

    'border': '#2a2a2a',

    'text': '#000000',

    # ==========================================================================
    # BUTTON STATES
    # ==========================================================================

    'button_bg': '#dcdcdc',         # 220, 220, 220
    'button_pressed': '#787878',    # 120, 120, 120
    'button_active': '#96afe1',     # 150, 175, 225
    'button_hover': '#e8e8e8',

    # ==========================================================================
    # FONTS
    # ==========================================================================

    'font_family': 'Helvetica' if platform.system() == 'Darwin' else 'sans-serif',
}
