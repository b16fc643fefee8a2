"""Exception types raised by the benchmark and mapped to exit codes by the CLI."""

from typing import Sequence


class BenchmarkError(Exception):
    """Base class for benchmark errors."""


class UsageError(BenchmarkError):
    """Invalid command line or repository information."""


class CommandFailedError(BenchmarkError):
    """A git command exited non-zero while strict mode was enabled."""

    def __init__(self, command: Sequence[str], returncode: int):
        self.command = tuple(command)
        self.returncode = returncode
        super().__init__(f"{' '.join(self.command)} failed (code {returncode})")
