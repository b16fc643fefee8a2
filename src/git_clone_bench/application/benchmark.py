"""Benchmark orchestration: banner, then every applicable strategy per repository."""

from typing import Optional, Sequence

from ..core.executor import StrategyExecutor
from ..domain.models import BenchmarkResult, CloneStrategy, RepoSpec, StrategyKind
from ..domain.strategies import applicable_strategies
from ..infra import host
from ..infra.console import BLUE, GREEN, Console


def format_duration(seconds: float) -> str:
    """Seconds in the shell `time` format: `1m2.345s`."""
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m{rest:.3f}s"


def repository_count(count: int) -> str:
    if count == 1:
        return "1 repository"
    return f"{count} repositories"


def strategy_title(strategy: CloneStrategy, console: Console) -> str:
    title = f"Testing {strategy.kind.label} strategy"
    if strategy.kind is StrategyKind.SINGLE_BRANCH:
        title += f" for {console.paint(BLUE, strategy.branch)}"
    return title


def print_banner(specs: Sequence[RepoSpec], dry_run: bool, console: Console) -> None:
    console.title(f"Benchmarking git clone strategies for {repository_count(len(specs))}:")
    for spec in specs:
        console.echo(f"  * {spec.describe()}")

    console.section(f"Host information: {host.host_summary()}")
    console.section("Operating system details")
    console.echo(host.os_details())
    console.section(f"Git version: {host.git_version()}")

    if dry_run:
        console.warn("Dry-mode activated: no actual command will be tested")


def print_result(result: BenchmarkResult, console: Console) -> None:
    if result.elapsed is None:
        return
    console.echo()
    console.echo(f"real\t{format_duration(result.elapsed)}")
    if result.user is not None:
        console.echo(f"user\t{format_duration(result.user)}")
    if result.system is not None:
        console.echo(f"sys\t{format_duration(result.system)}")


def run_all(
    remote: str,
    specs: Sequence[RepoSpec],
    dry_run: bool,
    console: Console,
    executor: Optional[StrategyExecutor] = None,
) -> None:
    """Run every applicable strategy for every repository, one at a time.

    Runs are strictly sequential: concurrent clones would skew each other's
    timings.
    """
    if executor is None:
        executor = StrategyExecutor(remote, console)

    print_banner(specs, dry_run, console)

    for spec in specs:
        console.title(f"Benchmarking {console.paint(GREEN, spec.name)}")
        for strategy in applicable_strategies(spec):
            console.title(strategy_title(strategy, console))
            result = executor.run(strategy, dry_run)
            print_result(result, console)
