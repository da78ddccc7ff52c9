"""
Host module - access to REAPER (or an in-memory stand-in).
"""

from .base import Host, HostError, MemoryHost
from .ini_store import IniConfigStore, MemoryConfigStore, slot_key
from .window_state import (
    DEFAULT_WINDOW_STATE,
    WindowState,
    load_window_state,
    save_window_state,
)

__all__ = [
    "Host",
    "HostError",
    "MemoryHost",
    "IniConfigStore",
    "MemoryConfigStore",
    "slot_key",
    "DEFAULT_WINDOW_STATE",
    "WindowState",
    "load_window_state",
    "save_window_state",
]
