"""
Host interface - the slice of the REAPER API the viewer uses.

ReaperHost (host/reaper.py) talks to a running REAPER through reapy.
MemoryHost keeps everything in memory for tests and --demo runs.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple


class HostError(Exception):
    """Raised when the host application cannot be reached."""
    pass


class Host(ABC):
    """Synchronous host calls. Return codes are never checked by callers."""

    @abstractmethod
    def main_on_command(self, command_id: int) -> None:
        """Run a main section action."""

    @abstractmethod
    def toggle_state(self, command_id: int) -> int:
        """1 = on, 0 = off, -1 = not a toggle action."""

    @abstractmethod
    def selected_items(self) -> List[Any]:
        """Selected media items of the current project, in order."""

    @abstractmethod
    def set_item_selected(self, item: Any, selected: bool) -> None:
        ...

    @abstractmethod
    def get_ext_state(self, section: str, key: str) -> str:
        """Empty string when the key is not set."""

    @abstractmethod
    def set_ext_state(self, section: str, key: str, value: str, persist: bool) -> None:
        ...

    @abstractmethod
    def show_message(self, text: str, title: str) -> None:
        ...

    @abstractmethod
    def console(self, msg: str) -> None:
        ...

    @abstractmethod
    def ini_file(self) -> Optional[str]:
        """Path of reaper.ini."""

    @abstractmethod
    def script_path(self) -> str:
        ...

    @abstractmethod
    def app_version(self) -> str:
        ...

    @abstractmethod
    def has_reapack(self) -> bool:
        """Whether the ReaPack extension API (v1.2+) is available."""

    @abstractmethod
    def reapack_owner(self, path: str) -> Any:
        """Package entry owning a file, or None."""

    @abstractmethod
    def reapack_about(self, owner: Any) -> None:
        ...

    @abstractmethod
    def reapack_free(self, owner: Any) -> None:
        ...


class MemoryHost(Host):
    """
    In-memory host.

    Every command is recorded in `commands` along with the item selection
    at the time it ran. `command_hooks` can emulate what REAPER would do.
    The nudge dialog action flips its own toggle state like the real one.
    """

    def __init__(self, dialog_action: Optional[int] = None,
                 app_version: str = "7.0/linux-x86_64"):
        self.commands: List[int] = []
        self.selection_at_command: List[Tuple[Any, ...]] = []
        self.command_hooks: Dict[int, Callable[[], None]] = {}
        self.toggles: Dict[int, int] = {}
        self.items: Dict[Any, bool] = {}
        self.ext_state: Dict[Tuple[str, str], str] = {}
        self.persisted: Dict[Tuple[str, str], bool] = {}
        self.messages: List[Tuple[str, str]] = []
        self.console_output: List[str] = []
        self.reapack_installed = False
        self.reapack_owners: Dict[str, Any] = {}
        self.about_opened: List[Any] = []
        self.freed: List[Any] = []
        self.ini_path: Optional[str] = None
        self._script_path = "/Scripts/cfillion_Show all saved nudge settings.py"
        self._app_version = app_version
        self._dialog_action = dialog_action

    # --- Test helpers ---

    def add_items(self, *names, selected=True):
        for name in names:
            self.items[name] = selected

    def set_toggle(self, command_id: int, state: int):
        self.toggles[command_id] = state

    # --- Host ---

    def main_on_command(self, command_id: int) -> None:
        self.commands.append(command_id)
        self.selection_at_command.append(tuple(self.selected_items()))
        if command_id == self._dialog_action:
            self.toggles[command_id] = 0 if self.toggles.get(command_id, 0) else 1
        hook = self.command_hooks.get(command_id)
        if hook:
            hook()

    def toggle_state(self, command_id: int) -> int:
        return self.toggles.get(command_id, -1)

    def selected_items(self) -> List[Any]:
        return [item for item, selected in self.items.items() if selected]

    def set_item_selected(self, item: Any, selected: bool) -> None:
        self.items[item] = selected

    def get_ext_state(self, section: str, key: str) -> str:
        return self.ext_state.get((section, key), "")

    def set_ext_state(self, section: str, key: str, value: str, persist: bool) -> None:
        self.ext_state[(section, key)] = value
        self.persisted[(section, key)] = persist

    def show_message(self, text: str, title: str) -> None:
        self.messages.append((text, title))

    def console(self, msg: str) -> None:
        self.console_output.append(msg)

    def ini_file(self) -> Optional[str]:
        return self.ini_path

    def script_path(self) -> str:
        return self._script_path

    def app_version(self) -> str:
        return self._app_version

    def has_reapack(self) -> bool:
        return self.reapack_installed

    def reapack_owner(self, path: str) -> Any:
        return self.reapack_owners.get(path)

    def reapack_about(self, owner: Any) -> None:
        self.about_opened.append(owner)

    def reapack_free(self, owner: Any) -> None:
        self.freed.append(owner)
