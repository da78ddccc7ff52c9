"""
REAPER host adapter built on reapy.

Works both as a ReaScript running inside REAPER and from an external
Python process once reapy's distant API has been enabled in REAPER
(`python -c "import reapy; reapy.configure_reaper()"`).
"""

import os
import sys
from typing import Any, List, Optional

from nudge_viewer.utils.logger import logger
from .base import Host, HostError

REAPACK_ERROR_SIZE = 512


class ReaperHost(Host):
    """
    Host backed by `reapy.reascript_api`.

    `script_path` is the path REAPER knows the script by; ReaPack looks its
    owner package up from it. Inside REAPER `sys.argv[0]` is that path. An
    external process started through the `nudge-viewer` console script must
    pass it explicitly (`--script-path`), otherwise help() reports the
    script as not installed through ReaPack.
    """

    def __init__(self, script_path: Optional[str] = None):
        try:
            import reapy
            if not reapy.is_inside_reaper():
                reapy.connect()
            from reapy import reascript_api
        except Exception as e:
            raise HostError(f"Cannot reach REAPER: {e}") from e

        self._reapy = reapy
        self.RPR = reascript_api
        self._script_path = script_path or os.path.abspath(sys.argv[0])
        logger.info(f"Connected to REAPER {self.app_version()}", component="HOST")

    def main_on_command(self, command_id: int) -> None:
        self.RPR.Main_OnCommand(command_id, 0)

    def toggle_state(self, command_id: int) -> int:
        return int(self.RPR.GetToggleCommandState(command_id))

    def selected_items(self) -> List[Any]:
        with self._reapy.inside_reaper():
            count = self.RPR.CountSelectedMediaItems(0)
            return [self.RPR.GetSelectedMediaItem(0, i) for i in range(count)]

    def set_item_selected(self, item: Any, selected: bool) -> None:
        self.RPR.SetMediaItemSelected(item, selected)

    def get_ext_state(self, section: str, key: str) -> str:
        return str(self.RPR.GetExtState(section, key) or "")

    def set_ext_state(self, section: str, key: str, value: str, persist: bool) -> None:
        self.RPR.SetExtState(section, key, value, persist)

    def show_message(self, text: str, title: str) -> None:
        self.RPR.ShowMessageBox(text, title, 0)

    def console(self, msg: str) -> None:
        self.RPR.ShowConsoleMsg(msg)

    def ini_file(self) -> Optional[str]:
        return self.RPR.get_ini_file()

    def script_path(self) -> str:
        return self._script_path

    def app_version(self) -> str:
        return str(self.RPR.GetAppVersion())

    def has_reapack(self) -> bool:
        return hasattr(self.RPR, "ReaPack_GetOwner")

    def reapack_owner(self, path: str) -> Any:
        # Output buffers come back as a tuple led by the return value
        result = self.RPR.ReaPack_GetOwner(path, "", REAPACK_ERROR_SIZE)
        if isinstance(result, (list, tuple)):
            return result[0]
        return result

    def reapack_about(self, owner: Any) -> None:
        self.RPR.ReaPack_AboutInstalledPackage(owner)

    def reapack_free(self, owner: Any) -> None:
        self.RPR.ReaPack_FreeEntry(owner)
