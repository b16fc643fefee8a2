"""Host details printed in the benchmark banner."""

import platform
import subprocess

from ..core.process_control import background_subprocess_kwargs

GIT_VERSION_UNAVAILABLE = "unavailable"


def host_summary() -> str:
    """Like `uname -sm`."""
    return f"{platform.system()} {platform.machine()}"


def os_details() -> str:
    """Like `uname -a`."""
    uname = platform.uname()
    parts = [uname.system, uname.node, uname.release, uname.version, uname.machine]
    return " ".join(part for part in parts if part)


def git_version(git: str = "git") -> str:
    """Output of `git --version`, or "unavailable" when git cannot be run."""
    try:
        result = subprocess.run(
            [git, "--version"],
            capture_output=True,
            text=True,
            timeout=10,
            **background_subprocess_kwargs(),
        )
    except (FileNotFoundError, subprocess.TimeoutExpired, subprocess.SubprocessError):
        return GIT_VERSION_UNAVAILABLE

    if result.returncode != 0:
        return GIT_VERSION_UNAVAILABLE
    return result.stdout.strip() or GIT_VERSION_UNAVAILABLE
