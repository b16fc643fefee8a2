import pytest

from git_clone_bench.domain.models import RepoSpec
from git_clone_bench.domain.repo_spec import parse_repo_info, parse_repo_infos, repository_url
from git_clone_bench.errors import UsageError


def test_parse_repo_info_name_only():
    assert parse_repo_info("myrepo") == RepoSpec(name="myrepo", branches=())


def test_parse_repo_info_keeps_branch_order():
    spec = parse_repo_info("myrepo:main,develop,fixup")
    assert spec.name == "myrepo"
    assert spec.branches == ("main", "develop", "fixup")


def test_parse_repo_info_trailing_colon_means_no_branches():
    assert parse_repo_info("myrepo:").branches == ()


def test_parse_repo_info_rejects_empty_name_and_branches():
    with pytest.raises(UsageError):
        parse_repo_info(":main")
    with pytest.raises(UsageError):
        parse_repo_info("myrepo:main,,develop")
    with pytest.raises(UsageError):
        parse_repo_info("myrepo:main,")


def test_parse_repo_infos_preserves_input_order():
    specs = parse_repo_infos(["b", "a:x"])
    assert [spec.name for spec in specs] == ["b", "a"]


def test_describe_lists_branches():
    assert RepoSpec("myrepo").describe() == "myrepo"
    assert RepoSpec("myrepo", ("main", "develop")).describe() == "myrepo (main, develop)"


def test_repository_url():
    assert repository_url("myhost.example.com", "myrepo") == "ssh://myhost.example.com/myrepo"
