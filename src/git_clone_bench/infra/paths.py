# Path helpers
#
#   - report_path(): `<cwd>/<program name without extension>.report`
#   - create_scratch_dir(): unique temporary directory for one strategy run
#   - remove_scratch_dir(): removal with a Windows rmdir fallback

import platform
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

from ..core.process_control import background_subprocess_kwargs

REPORT_SUFFIX = ".report"


def report_path(prog: str, cwd: Optional[Path] = None) -> Path:
    """Report file for the program invoked as `prog` (usually argv[0])."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    return base / f"{Path(prog).stem}{REPORT_SUFFIX}"


def create_scratch_dir(prefix: str) -> Path:
    """Create a uniquely named directory under the system temp location."""
    return Path(tempfile.mkdtemp(prefix=f"{prefix}-"))


def remove_scratch_dir(path: Path) -> None:
    """Remove a scratch directory.

    On Windows a failed rmtree is retried with `rmdir /s /q`; the original
    OSError is re-raised when that fails too.
    """
    if not path.exists():
        return

    try:
        shutil.rmtree(path)
    except OSError:
        # Windows: git pack files may be read-only, fall back to rmdir
        if platform.system() == 'Windows':
            try:
                subprocess.run(
                    ['cmd.exe', '/c', 'rmdir', '/s', '/q', str(path)],
                    check=True,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    timeout=10,
                    **background_subprocess_kwargs(),
                )
                return
            except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
                pass
        raise
