from git_clone_bench.domain.models import CloneStrategy, RepoSpec, StrategyKind
from git_clone_bench.domain.strategies import (
    applicable_strategies,
    command_plan,
    remote_branch_options,
)

URL = "ssh://myhost.example.com/myrepo"


def _kinds(strategies):
    return [(s.kind, s.branches) for s in strategies]


def test_no_branches_runs_plain_and_shallow_only():
    strategies = applicable_strategies(RepoSpec("myrepo"))
    assert _kinds(strategies) == [
        (StrategyKind.PLAIN, ()),
        (StrategyKind.SHALLOW, ()),
    ]


def test_one_branch_adds_single_branch_clone():
    strategies = applicable_strategies(RepoSpec("myrepo", ("main",)))
    assert _kinds(strategies) == [
        (StrategyKind.PLAIN, ()),
        (StrategyKind.SHALLOW, ()),
        (StrategyKind.SINGLE_BRANCH, ("main",)),
    ]
    assert strategies[-1].branch == "main"


def test_several_branches_add_selected_branches_last():
    strategies = applicable_strategies(RepoSpec("myrepo", ("main", "develop", "fixup")))
    assert _kinds(strategies) == [
        (StrategyKind.PLAIN, ()),
        (StrategyKind.SHALLOW, ()),
        (StrategyKind.SINGLE_BRANCH, ("main",)),
        (StrategyKind.SINGLE_BRANCH, ("develop",)),
        (StrategyKind.SINGLE_BRANCH, ("fixup",)),
        (StrategyKind.SELECTED_BRANCHES, ("main", "develop", "fixup")),
        (StrategyKind.SELECTED_BRANCHES_NO_TAGS, ("main", "develop", "fixup")),
    ]
    assert all(s.repository == "myrepo" for s in strategies)


def test_remote_branch_options():
    assert remote_branch_options(("master", "develop")) == ("-t", "master", "-t", "develop")


def test_clone_plans():
    plain = command_plan(CloneStrategy(StrategyKind.PLAIN, "myrepo"), URL)
    shallow = command_plan(CloneStrategy(StrategyKind.SHALLOW, "myrepo"), URL)
    single = command_plan(CloneStrategy(StrategyKind.SINGLE_BRANCH, "myrepo", ("main",)), URL)

    assert plain.listing() == (f"  git clone {URL}",)
    assert shallow.listing() == (f"  git clone --depth 1 {URL}",)
    assert single.listing() == (f"  git clone --branch main --single-branch {URL}",)
    assert plain.subdirectory is None


def test_selected_branches_plan_runs_inside_repository_directory():
    plan = command_plan(
        CloneStrategy(StrategyKind.SELECTED_BRANCHES, "myrepo", ("main", "develop")), URL
    )
    assert plan.subdirectory == "myrepo"
    assert plan.commands == (
        ("git", "init"),
        ("git", "remote", "add", "-t", "main", "-t", "develop", "-f", "origin", URL),
        ("git", "checkout", "master"),
    )


def test_selected_branches_no_tags_plan():
    plan = command_plan(
        CloneStrategy(StrategyKind.SELECTED_BRANCHES_NO_TAGS, "myrepo", ("main", "develop")), URL
    )
    assert plan.listing() == (
        "  git init",
        "  git config remote.origin.tagopt --no-tags",
        f"  git remote add -t main -t develop -f origin {URL}",
        "  git checkout master",
        "  git config --unset remote.origin.tagopt",
    )


def test_listing_is_rendered_from_the_executed_commands():
    for strategy in applicable_strategies(RepoSpec("myrepo", ("main", "develop"))):
        plan = command_plan(strategy, URL)
        assert plan.listing() == tuple(f"  {' '.join(c)}" for c in plan.commands)
        assert command_plan(strategy, URL) == plan
