# Repository information parsing
#
#   - parse_repo_info(): `<repo-name>[:<branch-name>[,<branch-name> ...]]` -> RepoSpec
#   - repository_url(): ssh URL of a repository on the remote

from typing import Iterable, List

from ..errors import UsageError
from .models import RepoSpec


def parse_repo_info(repo_info: str) -> RepoSpec:
    """Parse one `<repo-info>` argument.

    The name ends at the first colon. `name:` is accepted and yields no
    branches; an empty name or an empty branch between commas is rejected.
    """
    name, sep, branch_text = repo_info.partition(":")
    if not name:
        raise UsageError(f"missing repository name in '{repo_info}'")

    if not sep or not branch_text:
        return RepoSpec(name=name)

    branches = tuple(branch_text.split(","))
    if any(not branch for branch in branches):
        raise UsageError(f"empty branch name in '{repo_info}'")
    return RepoSpec(name=name, branches=branches)


def parse_repo_infos(repo_infos: Iterable[str]) -> List[RepoSpec]:
    return [parse_repo_info(repo_info) for repo_info in repo_infos]


def repository_url(remote: str, name: str) -> str:
    return f"ssh://{remote}/{name}"
