"""App path helpers (cross-platform).

Environment overrides (useful for portable/dev launches):
- NV_DATA_DIR: base dir for logs and other app data
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "NudgeViewer"


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name)
    if not v:
        return None
    return Path(os.path.expanduser(v)).resolve()


def get_app_log_dir() -> Path:
    """Log dir, created on first use."""
    log_dir = _env_path("NV_DATA_DIR")
    if log_dir is None:
        log_dir = Path(user_log_dir(APP_NAME, appauthor=False)).resolve()
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_default_log_path() -> Path:
    return get_app_log_dir() / "nudge_viewer.log"
