"""Domain models, repository information parsing and the strategy catalog."""

from .models import BenchmarkResult, CloneStrategy, CommandPlan, RepoSpec, StrategyKind
from .repo_spec import parse_repo_info, parse_repo_infos, repository_url
from .strategies import applicable_strategies, command_plan, remote_branch_options

__all__ = [
    "BenchmarkResult",
    "CloneStrategy",
    "CommandPlan",
    "RepoSpec",
    "StrategyKind",
    "parse_repo_info",
    "parse_repo_infos",
    "repository_url",
    "applicable_strategies",
    "command_plan",
    "remote_branch_options",
]
