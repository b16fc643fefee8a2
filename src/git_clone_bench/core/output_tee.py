"""Duplicate transcript output to the terminal and an escape-free report file."""

import re
import sys
from pathlib import Path
from typing import Optional, TextIO

try:
    from colorama.ansitowin32 import AnsiToWin32
except ImportError:
    AnsiToWin32 = None

from ..infra.logger import log_warning

# `ESC ( B` and friends select a character set (`tput sgr0` emits one); they
# are not CSI sequences so colorama leaves them alone.
CHARSET_DESIGNATOR_RE = re.compile(r'\x1b[()][0-9A-Za-z]')


class OutputTee:
    """Write everything to `terminal` unmodified and to `report_path` stripped.

    The report file is truncated on construction. Report writes are line
    buffered so an escape sequence split across two writes is still removed.
    When colorama is not installed the report receives the raw text.
    """

    def __init__(self, report_path: Path, terminal: Optional[TextIO] = None):
        self.report_path = Path(report_path)
        self.terminal = terminal if terminal is not None else sys.stdout
        self._report = open(self.report_path, "w", encoding="utf-8")
        self._pending = ""

        if AnsiToWin32 is not None:
            self._report_writer = AnsiToWin32(self._report, convert=False, strip=True)
            self.strips_escapes = True
        else:
            self._report_writer = None
            self.strips_escapes = False
            log_warning("colorama not installed, report will contain escape sequences.")

    @property
    def closed(self) -> bool:
        return self._report.closed

    def isatty(self) -> bool:
        isatty = getattr(self.terminal, "isatty", None)
        return bool(isatty and isatty())

    def write(self, text: str) -> int:
        if self.closed:
            raise ValueError("write to a restored OutputTee")

        self.terminal.write(text)
        self.terminal.flush()

        self._pending += text
        complete, newline, rest = self._pending.rpartition("\n")
        if newline:
            self._write_report(complete + newline)
            self._pending = rest
        return len(text)

    def flush(self) -> None:
        self.terminal.flush()
        self._report.flush()

    def _write_report(self, text: str) -> None:
        if self._report_writer is None:
            self._report.write(text)
            return
        self._report_writer.write(CHARSET_DESIGNATOR_RE.sub("", text))

    def restore(self) -> None:
        """Flush what is left and close the report. Safe to call twice."""
        if self.closed:
            return
        if self._pending:
            self._write_report(self._pending)
            self._pending = ""
        self.terminal.flush()
        self._report.close()

    def __enter__(self) -> "OutputTee":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()
