"""
Main entry point for the nudge settings viewer.
Connects to REAPER (or the demo host) and opens the viewer window.
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="nudge-viewer",
        description="Show all saved REAPER nudge settings")
    parser.add_argument("--demo", action="store_true",
                        help="run with built-in settings, without REAPER")
    parser.add_argument("--debug", action="store_true",
                        help="log debug messages to the terminal")
    parser.add_argument("--log-file", nargs="?", const="", default=None,
                        help="also log to a file (default location if no path given)")
    parser.add_argument("--script-path", default=None,
                        help="installed path of the ReaScript, used to look up its ReaPack package")
    return parser.parse_args(argv)


def build_session(args):
    """Create the host, config store and session for the given options."""
    from nudge_viewer.host import HostError, IniConfigStore
    from nudge_viewer.host.demo import make_demo_host
    from nudge_viewer.nudge import ViewerSession
    from nudge_viewer.utils.logger import logger

    if args.demo:
        host, store = make_demo_host()
    else:
        from nudge_viewer.host.reaper import ReaperHost
        try:
            host = ReaperHost(script_path=args.script_path)
        except HostError as e:
            logger.error("REAPER is not reachable", component="APP", details=str(e))
            logger.info("Use --demo to run without REAPER", component="APP")
            return None
        store = IniConfigStore(host.ini_file())
        logger.attach_host_console(host)

    return ViewerSession(host, store)


def main(argv=None):
    # Initialize logger first
    from nudge_viewer.utils.logger import logger, LogLevel, set_log_level
    from nudge_viewer.utils.app_paths import get_default_log_path

    args = parse_args(argv)
    if args.debug:
        set_log_level(LogLevel.DEBUG)
    if args.log_file is not None:
        logger.enable_file_logging(args.log_file or str(get_default_log_path()))

    logger.info("Nudge viewer starting", component="APP")

    session = build_session(args)
    if session is None:
        return 1

    app = QApplication(sys.argv[:1])

    from nudge_viewer.gui.nudge_window import NudgeSettingsWindow

    window = NudgeSettingsWindow(session)
    window.show()

    status = app.exec_()
    logger.info("Nudge viewer closed", component="APP")
    return status


if __name__ == "__main__":
    sys.exit(main())
