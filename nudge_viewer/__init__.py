"""
Nudge Viewer - browse, use and edit REAPER's saved nudge settings.
"""

__version__ = "2.0.0"
