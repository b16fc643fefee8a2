from pathlib import Path
import io
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class FakeProcess:
    """Stand-in for subprocess.Popen that replays canned output."""

    def __init__(self, command, output="", returncode=0, **kwargs):
        self.command = command
        self.kwargs = kwargs
        self.stdout = io.StringIO(output)
        self.returncode = returncode
        self.pid = 4242

    def wait(self, timeout=None):
        return self.returncode

    def poll(self):
        return self.returncode


@pytest.fixture
def fake_git(monkeypatch):
    """Replace process start in the executor and record every command.

    Set `outcomes[<subcommand>] = (output, returncode)` to script a result.
    """
    calls = []
    outcomes = {}

    def fake_start_process(command, **kwargs):
        cwd = Path(kwargs["cwd"])
        calls.append({"command": tuple(command), "cwd": cwd, "cwd_existed": cwd.is_dir()})
        output, returncode = outcomes.get(command[1], ("", 0))
        return FakeProcess(command, output=output, returncode=returncode, **kwargs)

    monkeypatch.setattr("git_clone_bench.core.executor.start_process", fake_start_process)
    fake_start_process.calls = calls
    fake_start_process.outcomes = outcomes
    return fake_start_process


@pytest.fixture
def fake_host(monkeypatch):
    monkeypatch.setattr("git_clone_bench.infra.host.host_summary", lambda: "Linux x86_64")
    monkeypatch.setattr("git_clone_bench.infra.host.os_details", lambda: "Linux box 6.1.0 #1 SMP x86_64")
    monkeypatch.setattr("git_clone_bench.infra.host.git_version", lambda git="git": "git version 2.43.0")
