"""Tests for digest aggregation and the scan node."""

import pytest

from gitstandup.config import DigestConfig
from gitstandup.models.base import CommitRecord, RepositoryInfo
from gitstandup.nodes.aggregator import DigestAccumulator
from gitstandup.nodes.scan_node import scan_node, scan_repositories


@pytest.fixture
def commit_factory():
    """Factory fixture for creating CommitRecord instances."""

    def create_commit(subject: str, short_hash: str = "abc1234") -> CommitRecord:
        return CommitRecord(short_hash=short_hash, author="Ada Lovelace", relative_time="1 hour ago", subject=subject)

    return create_commit


def test_accumulator_totals(commit_factory):
    accumulator = DigestAccumulator(window_hours=8)
    api = RepositoryInfo("api", "main")
    web = RepositoryInfo("web", "develop")

    for info, commits in [
        (api, [commit_factory("a"), commit_factory("b")]),
        (RepositoryInfo("docs", "main"), []),
        (web, [commit_factory("c")]),
    ]:
        accumulator.mark_scanned()
        accumulator.add(info, commits)
    accumulator.mark_scanned()  # a skipped, invalid path

    report = accumulator.build()

    assert report.window_hours == 8
    assert report.scanned_repo_count == 4
    assert report.active_repo_count == 2
    assert report.total_commits == 3
    assert [r.info for r in report.results] == [api, web]


def test_accumulator_keeps_duplicates(commit_factory):
    """The same repository added twice is reported twice."""
    accumulator = DigestAccumulator(window_hours=24)
    info = RepositoryInfo("api", "main")
    accumulator.add(info, [commit_factory("a")])
    accumulator.add(info, [commit_factory("a")])

    report = accumulator.build()

    assert report.active_repo_count == 2
    assert report.total_commits == 2


def test_empty_accumulator():
    report = DigestAccumulator(window_hours=24).build()

    assert report.results == ()
    assert report.total_commits == 0
    assert report.active_repo_count == 0


def test_scan_repositories_preserves_order_and_skips(active_repo, repo_factory, make_commit, tmp_path):
    """Invalid and quiet repositories count as scanned but produce no result."""
    other = repo_factory("other")
    make_commit(other, "Write docs")
    quiet = repo_factory("quiet")
    make_commit(quiet, "Old", date="1577880000 +0000")
    plain = tmp_path / "plain"
    plain.mkdir()

    paths = [other.working_dir, str(plain), quiet.working_dir, active_repo.working_dir, other.working_dir]
    report = scan_repositories(paths, 24)

    assert report.scanned_repo_count == 5
    assert [r.info.display_name for r in report.results] == ["other", "active", "other"]
    assert report.total_commits == 4


def test_scan_node_updates_state(active_repo):
    config = DigestConfig.build(repos=active_repo.working_dir)
    state = scan_node({"digest_config": config, "repo_paths": [active_repo.working_dir]})

    report = state["report"]
    assert report.total_commits == 2
    assert report.active_repo_count == 1
    assert report.results[0].info.display_name == "active"
