"""
Configuration stores for nudge settings.

REAPER keeps the nudge settings in the [REAPER] section of reaper.ini:
`nudge` / `nudgeamt` for the last used settings and `nudge_N` / `nudgeamt_N`
for saved bank N. Absent or unreadable values read as 0.
"""

import configparser
import math
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from nudge_viewer.config import INI_SECTION
from nudge_viewer.utils.logger import logger


def slot_key(key: str, slot: int) -> str:
    """`nudge` for slot 0, `nudge_3` for slot 3."""
    if slot > 0:
        return f"{key}_{slot}"
    return key


def _to_float(raw: Optional[str]) -> float:
    if raw is None:
        return 0.0
    try:
        value = float(raw.strip())
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        logger.debug(f"Unparsable value {raw!r}", component="INI")
        return 0.0
    return value


class MemoryConfigStore:
    """Dict-backed store, keyed by full ini key (`nudge_3`)."""

    def __init__(self, values: Optional[Dict[str, object]] = None):
        self.values: Dict[str, object] = dict(values or {})

    def set(self, key: str, slot: int, value) -> None:
        self.values[slot_key(key, slot)] = value

    def read_float(self, key: str, slot: int) -> float:
        value = self.values.get(slot_key(key, slot))
        return _to_float(None if value is None else str(value))

    def read_int(self, key: str, slot: int) -> int:
        return int(self.read_float(key, slot))


class IniConfigStore:
    """
    Read-only view of reaper.ini.

    The file is re-parsed whenever its modification time or size changes, so
    values REAPER writes when the nudge dialog closes are picked up on the
    next read.
    """

    def __init__(self, path, section: str = INI_SECTION):
        self.path = Path(path) if path else None
        self.section = section
        self._parser: Optional[configparser.ConfigParser] = None
        self._stamp: Optional[Tuple[int, int]] = None

    def _load(self) -> Optional[configparser.ConfigParser]:
        if self.path is None:
            return None
        try:
            st = os.stat(self.path)
        except OSError:
            logger.debug(f"Cannot stat {self.path}", component="INI")
            return None

        # A rewrite within the same timestamp tick keeps st_mtime_ns
        stamp = (st.st_mtime_ns, st.st_size)
        if self._parser is not None and stamp == self._stamp:
            return self._parser

        parser = configparser.ConfigParser(
            interpolation=None, strict=False, allow_no_value=True)
        try:
            with open(self.path, encoding="utf-8", errors="replace") as f:
                parser.read_file(f)
        except (OSError, configparser.Error) as e:
            logger.warning("Failed to read configuration", component="INI",
                           details=str(e))
            return None

        self._parser = parser
        self._stamp = stamp
        logger.debug(f"Loaded {self.path}", component="INI")
        return parser

    def read_raw(self, key: str, slot: int) -> Optional[str]:
        parser = self._load()
        if parser is None or not parser.has_section(self.section):
            return None
        return parser.get(self.section, slot_key(key, slot), fallback=None)

    def read_float(self, key: str, slot: int) -> float:
        return _to_float(self.read_raw(key, slot))

    def read_int(self, key: str, slot: int) -> int:
        return int(self.read_float(key, slot))
