# Command line entry point
#
#   benchmark-git-clone [-n] [--strict] <remote> <repo-info> [<repo-info> ...]
#
# Exit codes:
#   0   benchmark finished
#   1   usage error, or a git command failed in --strict mode
#   2   Python interpreter too old
#   130 interrupted

import argparse
import platform
import sys
from pathlib import Path
from typing import List, Optional

from .application.benchmark import run_all
from .config import MIN_PYTHON, BenchmarkConfig
from .core.executor import StrategyExecutor
from .core.output_tee import OutputTee
from .domain.repo_spec import parse_repo_infos
from .errors import CommandFailedError, UsageError
from .infra.console import GREEN, RED, WHITE, Console
from .infra.logger import log_error
from .infra.paths import report_path

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 1
EXIT_ENVIRONMENT = 2
EXIT_INTERRUPTED = 130


class _UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors as UsageError instead of exiting 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser(prog: str) -> argparse.ArgumentParser:
    parser = _UsageParser(prog=prog, add_help=False, allow_abbrev=False)
    parser.add_argument('-h', '--help', action='store_true')
    parser.add_argument('-n', dest='dry_run', action='store_true')
    parser.add_argument('--strict', action='store_true')
    parser.add_argument('remote', nargs='?')
    parser.add_argument('repo_infos', nargs='*', metavar='repo-info')
    return parser


def print_usage(prog: str) -> None:
    """Colored usage on stderr."""
    console = Console(sys.stderr)
    positional = "<remote> <repo-info> [<repo-info> ...]"
    lines = [
        f"usage: {console.paint(WHITE, prog)} [-n] [--strict] {positional}",
        "",
        console.paint(RED, "OPTIONS"),
        f"    {console.paint(GREEN, '-n')}",
        "        Dry-run mode, do not execute git commands.",
        "",
        f"    {console.paint(GREEN, '--strict')}",
        "        Stop a strategy at its first failing git command and exit 1.",
        "        By default failures are ignored and only timings are reported.",
        "",
        console.paint(RED, "POSITIONAL ARGUMENTS"),
        f"    {console.paint(GREEN, '<remote>')}",
        "        The base URL to the remote.",
        "",
        f"    {console.paint(GREEN, '<repo-info>')}",
        "        Must contain the repository name, and optionally a list of",
        "        branches. If the branches are specified, this benchmark",
        "        program will try more strategies that fetch only those",
        "        branches.",
        "",
        console.paint(RED, "REPOSITORY INFORMATION"),
        "    The syntax of the repository information is",
        "",
        "        <repo-name>[:<branch-name>[,<branch-name> ...]]",
        "",
    ]
    for line in lines:
        console.echo(line)


def parse_args(argv: List[str], prog: str) -> BenchmarkConfig:
    """Parse the command line; raises UsageError with an empty message for -h."""
    args = build_parser(prog).parse_args(argv)
    if args.help:
        raise UsageError("")
    if args.remote is None or not args.repo_infos:
        raise UsageError("missing parameter(s)")

    return BenchmarkConfig(
        remote=args.remote,
        specs=tuple(parse_repo_infos(args.repo_infos)),
        report_path=report_path(prog),
        dry_run=args.dry_run,
        continue_on_error=not args.strict,
    )


def run(config: BenchmarkConfig) -> int:
    """Run the benchmark with its transcript mirrored into the report file."""
    tee = OutputTee(config.report_path)
    console = Console(tee)
    executor = StrategyExecutor(
        config.remote,
        console,
        continue_on_error=config.continue_on_error,
    )

    exit_code = EXIT_OK
    try:
        run_all(config.remote, config.specs, config.dry_run, console, executor)
    except CommandFailedError as e:
        console.warn(f"Benchmark stopped: {e}")
        exit_code = EXIT_FAILURE
    except KeyboardInterrupt:
        console.warn("Benchmark interrupted")
        exit_code = EXIT_INTERRUPTED
    finally:
        tee.restore()

    print(f"Output saved to {config.report_path}")
    return exit_code


def main(argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
    if sys.version_info < MIN_PYTHON:
        required = ".".join(str(part) for part in MIN_PYTHON)
        log_error(f"you need at least Python {required} to run this program.")
        log_error(f"You are currently using version {platform.python_version()}.")
        return EXIT_ENVIRONMENT

    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = Path(sys.argv[0]).name

    try:
        config = parse_args(argv, prog)
    except UsageError as e:
        if str(e):
            print(f"{prog}: {e}", file=sys.stderr)
        print_usage(prog)
        return EXIT_USAGE

    return run(config)


if __name__ == '__main__':
    sys.exit(main())
