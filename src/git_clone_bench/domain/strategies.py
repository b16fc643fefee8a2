"""Strategy catalog: which strategies apply to a repository and what they run."""

from typing import List, Tuple

from .models import CloneStrategy, CommandPlan, RepoSpec, StrategyKind

GIT = "git"

# Branch checked out by the selected-branches strategies.
CHECKOUT_BRANCH = "master"


def applicable_strategies(spec: RepoSpec) -> List[CloneStrategy]:
    """Strategies to run for `spec`, in execution order.

    Plain and shallow clones always apply. One single-branch clone is added
    per branch, and the selected-branches strategies only when at least two
    branches were given.
    """
    strategies = [
        CloneStrategy(StrategyKind.PLAIN, spec.name),
        CloneStrategy(StrategyKind.SHALLOW, spec.name),
    ]
    for branch in spec.branches:
        strategies.append(CloneStrategy(StrategyKind.SINGLE_BRANCH, spec.name, (branch,)))

    if len(spec.branches) >= 2:
        strategies.append(
            CloneStrategy(StrategyKind.SELECTED_BRANCHES, spec.name, spec.branches)
        )
        strategies.append(
            CloneStrategy(StrategyKind.SELECTED_BRANCHES_NO_TAGS, spec.name, spec.branches)
        )
    return strategies


def remote_branch_options(branches: Tuple[str, ...]) -> Tuple[str, ...]:
    """`("a", "b")` -> `("-t", "a", "-t", "b")` for `git remote add`."""
    options: List[str] = []
    for branch in branches:
        options.extend(["-t", branch])
    return tuple(options)


def command_plan(strategy: CloneStrategy, url: str) -> CommandPlan:
    """Render the commands of `strategy` for the repository at `url`."""
    kind = strategy.kind

    if kind is StrategyKind.PLAIN:
        return CommandPlan(((GIT, "clone", url),))

    if kind is StrategyKind.SHALLOW:
        return CommandPlan(((GIT, "clone", "--depth", "1", url),))

    if kind is StrategyKind.SINGLE_BRANCH:
        return CommandPlan(
            ((GIT, "clone", "--branch", strategy.branch, "--single-branch", url),)
        )

    remote_add = (GIT, "remote", "add") + remote_branch_options(strategy.branches) + (
        "-f",
        "origin",
        url,
    )
    checkout = (GIT, "checkout", CHECKOUT_BRANCH)

    if kind is StrategyKind.SELECTED_BRANCHES:
        commands = ((GIT, "init"), remote_add, checkout)
    elif kind is StrategyKind.SELECTED_BRANCHES_NO_TAGS:
        commands = (
            (GIT, "init"),
            (GIT, "config", "remote.origin.tagopt", "--no-tags"),
            remote_add,
            checkout,
            (GIT, "config", "--unset", "remote.origin.tagopt"),
        )
    else:
        raise ValueError(f"unknown strategy kind: {kind}")

    return CommandPlan(commands, subdirectory=strategy.repository)
