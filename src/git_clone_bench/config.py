"""Run configuration collected from the command line."""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from .domain.models import RepoSpec

# Oldest interpreter the benchmark runs on
MIN_PYTHON = (3, 8)


@dataclass(frozen=True)
class BenchmarkConfig:
    remote: str
    specs: Tuple[RepoSpec, ...]
    report_path: Path
    dry_run: bool = False
    # Record failing git commands and move on; False stops at the first one.
    continue_on_error: bool = True
