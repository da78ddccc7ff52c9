"""
Logger - Central logging system for the nudge viewer

Usage:
    from nudge_viewer.utils.logger import logger

    logger.debug("Detailed debug info")
    logger.info("Normal operation")
    logger.warning("Something unexpected")

    # With context
    logger.info("Slot 3 saved", component="SYNC")
    logger.error("Cannot reach REAPER", component="HOST", details=str(e))

Once a host is attached, messages are also mirrored to REAPER's console.
"""

import logging
import sys
from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG      # 10
    INFO = logging.INFO        # 20
    WARNING = logging.WARNING  # 30
    ERROR = logging.ERROR      # 40


class HostConsoleHandler(logging.Handler):
    """
    Logging handler that writes to the host's console (REAPER's
    "ReaScript console output" window).
    """

    def __init__(self, host):
        super().__init__()
        self.host = host

    def emit(self, record: logging.LogRecord):
        try:
            self.host.console(self.format(record) + "\n")
        except Exception:
            self.handleError(record)


class NudgeViewerLogger:
    """
    Central logger for the nudge viewer.

    Features:
    - Component tagging for filtering
    - Console (terminal) output
    - Optional host console output
    - Optional file output
    """

    def __init__(self):
        self._logger = logging.getLogger("nudge_viewer")
        self._logger.setLevel(logging.DEBUG)  # Capture all, filter on handlers
        self._logger.propagate = False

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        self._console_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S"
        ))
        self._logger.addHandler(self._console_handler)

        self._host_handler: Optional[HostConsoleHandler] = None
        self._file_handler: Optional[logging.FileHandler] = None

    def set_level(self, level: LogLevel):
        """Set minimum log level for console output."""
        self._console_handler.setLevel(level)

    def attach_host_console(self, host, level: LogLevel = LogLevel.WARNING):
        """Mirror messages at or above level to the host console."""
        self.detach_host_console()
        self._host_handler = HostConsoleHandler(host)
        self._host_handler.setLevel(level)
        self._host_handler.setFormatter(logging.Formatter("[nudge] %(message)s"))
        self._logger.addHandler(self._host_handler)

    def detach_host_console(self):
        if self._host_handler:
            self._logger.removeHandler(self._host_handler)
            self._host_handler = None

    def enable_file_logging(self, filepath: str):
        """Enable logging to file."""
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)

        self._file_handler = logging.FileHandler(filepath)
        self._file_handler.setLevel(logging.DEBUG)
        self._file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s"
        ))
        self._logger.addHandler(self._file_handler)

    def disable_file_logging(self):
        """Disable file logging."""
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    def _format_message(self, msg: str, component: Optional[str] = None,
                        details: Optional[str] = None) -> str:
        """Format message with optional component tag and details."""
        parts = []
        if component:
            parts.append(f"[{component}]")
        parts.append(msg)
        if details:
            parts.append(f"- {details}")
        return " ".join(parts)

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        """Log debug message (detailed info for troubleshooting)."""
        self._logger.debug(self._format_message(msg, component, details))

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        """Log info message (normal operation)."""
        self._logger.info(self._format_message(msg, component, details))

    def warning(self, msg: str, component: Optional[str] = None,
                details: Optional[str] = None):
        """Log warning message (unexpected but recoverable)."""
        self._logger.warning(self._format_message(msg, component, details))

    def error(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        """Log error message (something failed)."""
        self._logger.error(self._format_message(msg, component, details))

    def slot(self, slot: int, msg: str, details: Optional[str] = None):
        """Convenience: log slot-related message."""
        self.debug(f"Slot {slot}: {msg}", component="SLOT", details=details)


# Global logger instance
logger = NudgeViewerLogger()


def set_log_level(level: LogLevel):
    """Set the console log level."""
    logger.set_level(level)
