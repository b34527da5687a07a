"""Scan node: inspects each candidate repository and collects its recent commits."""

from typing import Iterable

from loguru import logger

from gitstandup.models.state import DigestReport, DigestState
from gitstandup.nodes.aggregator import DigestAccumulator
from gitstandup.nodes.commit_collector import collect_commits
from gitstandup.nodes.repository_inspector import describe_repository, open_repository


def scan_repositories(repo_paths: Iterable[str], hours: int) -> DigestReport:
    """Scan repositories one at a time, in the given order."""
    accumulator = DigestAccumulator(window_hours=hours)

    for path in repo_paths:
        accumulator.mark_scanned()

        repo = open_repository(path)
        if repo is None:
            continue

        with repo:
            info = describe_repository(repo, path)
            commits = collect_commits(repo, hours)

        logger.debug(f"{info.display_name} [{info.branch_label}]: {len(commits)} commits")
        accumulator.add(info, commits)

    return accumulator.build()


def scan_node(state: DigestState) -> DigestState:
    """Scan resolved repositories and update state with the digest report."""
    logger.debug("Executing Scan Node")

    report = scan_repositories(state["repo_paths"], state["digest_config"].hours)

    logger.debug(
        f"Found {report.total_commits} commits in {report.active_repo_count} "
        f"of {report.scanned_repo_count} repositories"
    )
    return {**state, "report": report}
