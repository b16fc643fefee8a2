# Strategy executor: run one clone strategy inside a scratch directory
#
#   - prints the command listing (dry-run included)
#   - runs the command sequence, streaming git output to the console
#   - times the whole sequence as a single span
#   - always removes the scratch directory
#
# Non-zero exit codes are recorded but do not stop the sequence unless
# continue_on_error is disabled.

import os
import subprocess
import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..domain.models import BenchmarkResult, CloneStrategy, CommandPlan
from ..domain.repo_spec import repository_url
from ..domain.strategies import command_plan
from ..errors import CommandFailedError
from ..infra.console import Console
from ..infra.paths import create_scratch_dir, remove_scratch_dir
from .process_control import start_process, terminate_process

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127

# Recorded when the working directory of a plan cannot be created
SETUP_FAILED = 1


class StrategyExecutor:
    """Run clone strategies against repositories hosted on `remote`."""

    def __init__(self, remote: str, console: Console, continue_on_error: bool = True):
        self.remote = remote
        self.console = console
        self.continue_on_error = continue_on_error

    def plan_for(self, strategy: CloneStrategy) -> CommandPlan:
        return command_plan(strategy, repository_url(self.remote, strategy.repository))

    def run(self, strategy: CloneStrategy, dry_run: bool) -> BenchmarkResult:
        plan = self.plan_for(strategy)

        self.console.section("Commands")
        for line in plan.listing():
            self.console.echo(line)

        self.console.section("Benchmark")
        if dry_run:
            self.console.echo("  skipped (dry-run)")
            return BenchmarkResult(
                strategy=strategy,
                repository=strategy.repository,
                branch_context=strategy.branch_context,
                elapsed=None,
                dry_run=True,
            )

        scratch_dir = create_scratch_dir(strategy.kind.prefix)
        try:
            times_before = os.times()
            started = time.perf_counter()
            workdir = self._prepare_workdir(scratch_dir, plan)
            if workdir is None:
                returncodes: Tuple[int, ...] = (SETUP_FAILED,)
            else:
                returncodes = self._run_sequence(plan.commands, workdir)
            elapsed = time.perf_counter() - started
            times_after = os.times()
        finally:
            try:
                remove_scratch_dir(scratch_dir)
            except OSError as e:
                self.console.warn(f"failed to remove scratch directory: {scratch_dir} - {e}")

        return BenchmarkResult(
            strategy=strategy,
            repository=strategy.repository,
            branch_context=strategy.branch_context,
            elapsed=elapsed,
            dry_run=False,
            user=times_after.children_user - times_before.children_user,
            system=times_after.children_system - times_before.children_system,
            returncodes=returncodes,
        )

    def _prepare_workdir(self, scratch_dir: Path, plan: CommandPlan) -> Optional[Path]:
        """Working directory for the plan, or None when it cannot be created."""
        if not plan.subdirectory:
            return scratch_dir

        workdir = scratch_dir / plan.subdirectory
        try:
            workdir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.console.warn(f"cannot create {workdir}: {e}")
            if not self.continue_on_error:
                raise CommandFailedError(("mkdir", "-p", plan.subdirectory), SETUP_FAILED)
            return None
        return workdir

    def _run_sequence(self, commands: Sequence[Tuple[str, ...]], workdir: Path) -> Tuple[int, ...]:
        returncodes: List[int] = []
        for command in commands:
            returncode = self._run_command(command, workdir)
            returncodes.append(returncode)
            if returncode != 0 and not self.continue_on_error:
                raise CommandFailedError(command, returncode)
        return tuple(returncodes)

    def _run_command(self, command: Tuple[str, ...], workdir: Path) -> int:
        try:
            process = start_process(
                list(command),
                cwd=str(workdir),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except FileNotFoundError as e:
            self.console.warn(f"cannot run {command[0]}: {e}")
            return COMMAND_NOT_FOUND

        try:
            for line in process.stdout:
                self.console.raw(line)
            return process.wait()
        except BaseException:
            terminate_process(process)
            raise
        finally:
            process.stdout.close()
