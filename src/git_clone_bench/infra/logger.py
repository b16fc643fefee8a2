# Diagnostic logging for the tool itself
#
#   - log_warning() / log_error(): stderr
#
# Timestamped, colored when colorama is available or the stream is a tty.
# Benchmark transcript output goes through infra.console instead.

import sys
from datetime import datetime
from typing import TextIO

# colorama is only needed for Windows consoles
try:
    import colorama
    colorama.just_fix_windows_console()
    USE_COLORAMA = True
except ImportError:
    USE_COLORAMA = False

# ANSI color codes
COLOR_RESET = '\033[0m'
COLOR_ERROR = '\033[0;31m'     # red
COLOR_WARNING = '\033[0;33m'   # yellow


def _get_timestamp() -> str:
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _format_message(level: str, color: str, message: str, stream: TextIO) -> str:
    timestamp = _get_timestamp()
    if USE_COLORAMA or stream.isatty():
        return f"{color}[{level}]{COLOR_RESET} [{timestamp}] {message}"
    return f"[{level}] [{timestamp}] {message}"


def log_warning(message: str) -> None:
    """Warnings go to stderr so they never end up in the report."""
    print(_format_message("WARNING", COLOR_WARNING, message, sys.stderr), file=sys.stderr)


def log_error(message: str) -> None:
    print(_format_message("ERROR", COLOR_ERROR, message, sys.stderr), file=sys.stderr)
