"""Styled transcript output (`==>` titles and sections) written to any text sink."""

from typing import Optional, TextIO

from .logger import USE_COLORAMA

RED = '\033[0;31m'
GREEN = '\033[0;32m'
BLUE = '\033[0;34m'
WHITE = '\033[1;37m'
RESET = '\033[0m'


class Console:
    """Write benchmark transcript lines to `sink`.

    Colors follow the logger rule: enabled when colorama is available or the
    terminal is a tty, unless `use_color` says otherwise.
    """

    def __init__(self, sink: TextIO, use_color: Optional[bool] = None):
        self.sink = sink
        if use_color is None:
            isatty = getattr(sink, "isatty", None)
            use_color = USE_COLORAMA or bool(isatty and isatty())
        self.use_color = use_color

    def paint(self, color: str, text: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{RESET}"

    def echo(self, text: str = "") -> None:
        self.sink.write(f"{text}\n")

    def raw(self, text: str) -> None:
        """Pass child process output through untouched."""
        self.sink.write(text)

    def _marker(self, color: str, text: str) -> None:
        self.echo(f"{self.paint(color, '==>')} {self.paint(WHITE, text)}")

    def title(self, text: str) -> None:
        self._marker(GREEN, text)

    def section(self, text: str) -> None:
        self._marker(BLUE, text)

    def warn(self, text: str) -> None:
        self._marker(RED, text)
