"""UI and terminal output styling for PeakSynth.

Submodules:
- console: Theme and console instance
- logging: File and console logging
- messages: Status messages and the console reporter
- progress: Progress bar utilities
"""

from peaksynth.ui.console import PEAKSYNTH_THEME, VERSION, console, icon
from peaksynth.ui.logging import close_logging, log_dict, setup_logging
from peaksynth.ui.messages import (
    ConsoleReporter,
    action,
    error,
    info,
    show_header,
    success,
    warning,
)
from peaksynth.ui.progress import create_progress

__all__ = [
    "PEAKSYNTH_THEME",
    "VERSION",
    "ConsoleReporter",
    "action",
    "close_logging",
    "console",
    "create_progress",
    "error",
    "icon",
    "info",
    "log_dict",
    "setup_logging",
    "show_header",
    "success",
    "warning",
]
