"""Process control helpers for running git children in their own process group."""

import os
import platform
import signal
import subprocess
from typing import Any, Dict


IS_WINDOWS = platform.system() == "Windows"


def background_subprocess_kwargs() -> Dict[str, Any]:
    """Return subprocess kwargs that hide console windows on Windows."""
    if not IS_WINDOWS:
        return {}

    startupinfo = subprocess.STARTUPINFO()
    startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW
    startupinfo.wShowWindow = subprocess.SW_HIDE
    return {
        "startupinfo": startupinfo,
        "creationflags": subprocess.CREATE_NO_WINDOW,
    }


def process_group_kwargs() -> Dict[str, Any]:
    """Return subprocess kwargs that start the child as a process group leader."""
    if IS_WINDOWS:
        return {"creationflags": subprocess.CREATE_NEW_PROCESS_GROUP}
    return {"start_new_session": True}


def start_process(command, **kwargs) -> subprocess.Popen:
    """Start `command` in its own process group."""
    popen_kwargs = dict(kwargs)
    for key, value in process_group_kwargs().items():
        popen_kwargs.setdefault(key, value)
    return subprocess.Popen(command, **popen_kwargs)


def terminate_process(process: subprocess.Popen, timeout: float = 2.0) -> None:
    """Terminate a process and its group best-effort."""
    if process.poll() is not None:
        return

    try:
        if IS_WINDOWS:
            subprocess.run(
                ["taskkill", "/F", "/T", "/PID", str(process.pid)],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
                **background_subprocess_kwargs(),
            )
        else:
            os.killpg(process.pid, signal.SIGTERM)
    except OSError:
        pass

    try:
        process.wait(timeout=timeout)
    except subprocess.TimeoutExpired:
        try:
            process.kill()
        except OSError:
            pass
