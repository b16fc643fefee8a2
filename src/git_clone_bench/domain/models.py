"""Domain data structures."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class RepoSpec:
    """A repository name plus the branches parsed from `<repo-info>`."""

    name: str
    branches: Tuple[str, ...] = ()

    def describe(self) -> str:
        if not self.branches:
            return self.name
        return f"{self.name} ({', '.join(self.branches)})"


class StrategyKind(Enum):
    """Clone strategies; the value is the scratch directory prefix."""

    PLAIN = "plain-clone"
    SHALLOW = "shallow-clone"
    SINGLE_BRANCH = "single-branch-clone"
    SELECTED_BRANCHES = "selected-branches-clone"
    SELECTED_BRANCHES_NO_TAGS = "selected-branches-no-tags-clone"

    @property
    def prefix(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    StrategyKind.PLAIN: "plain clone",
    StrategyKind.SHALLOW: "shallow clone",
    StrategyKind.SINGLE_BRANCH: "single branch clone",
    StrategyKind.SELECTED_BRANCHES: "selected branches clone",
    StrategyKind.SELECTED_BRANCHES_NO_TAGS: "selected branches (no tags) clone",
}


@dataclass(frozen=True)
class CloneStrategy:
    """One strategy bound to the repository (and branches) it clones."""

    kind: StrategyKind
    repository: str
    branches: Tuple[str, ...] = ()

    @property
    def branch(self) -> Optional[str]:
        if self.kind is StrategyKind.SINGLE_BRANCH:
            return self.branches[0]
        return None

    @property
    def branch_context(self) -> Optional[Tuple[str, ...]]:
        return self.branches or None


@dataclass(frozen=True)
class CommandPlan:
    """The exact argv sequence a strategy executes.

    `subdirectory` is created inside the scratch directory and used as the
    working directory of every command when set.
    """

    commands: Tuple[Tuple[str, ...], ...]
    subdirectory: Optional[str] = None

    def listing(self) -> Tuple[str, ...]:
        return tuple(f"  {' '.join(command)}" for command in self.commands)


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing of one strategy run. `elapsed` is None for dry-runs."""

    strategy: CloneStrategy
    repository: str
    branch_context: Optional[Tuple[str, ...]]
    elapsed: Optional[float]
    dry_run: bool
    user: Optional[float] = None
    system: Optional[float] = None
    returncodes: Tuple[int, ...] = field(default_factory=tuple)
