"""
git-standup commit collector.

Retrieves the non-merge commits of the current HEAD history made within the
digest window.
"""

from typing import List

from git import Repo
from git.exc import GitCommandError
from loguru import logger

from gitstandup.models.base import LOG_FORMAT, CommitRecord


def since_expression(hours: int) -> str:
    """Relative date understood by `git log --since` on every platform."""
    return f"{hours} hours ago"


def parse_log_output(output: str) -> List[CommitRecord]:
    """Parse `git log --format=LOG_FORMAT` output, newest first."""
    commits = []
    # Only "\n" ends a record; subjects may contain other line separators
    for line in output.split("\n"):
        if not line:
            continue
        try:
            commits.append(CommitRecord.from_log_line(line))
        except ValueError as e:
            logger.debug(f"Skipping unparseable log line: {e}")
    return commits


def collect_commits(repo: Repo, hours: int) -> List[CommitRecord]:
    """Retrieve non-merge commits from the last `hours` hours.

    A failing query (unborn branch, corrupted repository) counts as no
    commits so the repository is simply left out of the digest.
    """
    try:
        output = repo.git.log(
            f"--since={since_expression(hours)}",
            f"--format={LOG_FORMAT}",
            "--no-merges",
        )
    except GitCommandError as e:
        logger.debug(f"git log failed in {repo.git_dir}: {e.stderr.strip() if e.stderr else e}")
        return []

    return parse_log_output(output)
