"""
git-standup repository inspector.

Validates a candidate path and extracts the repository name and the branch
label shown in the digest header.
"""

import os
from typing import Optional

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from loguru import logger

from gitstandup.models.base import RepositoryInfo

DETACHED_HEAD = "HEAD"
UNKNOWN_BRANCH = "unknown"


def open_repository(path: str) -> Optional[Repo]:
    """Open the repository containing path, or warn and return None."""
    if not os.path.isdir(path):
        logger.warning(f"Path does not exist or is not a directory, skipping: {path}")
        return None

    try:
        # Works for bare repositories and for paths inside a working tree
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        logger.warning(f"Not a git repository, skipping: {path}")
        return None


def get_display_name(repo: Repo, path: str) -> str:
    """Name of the repository's top-level directory."""
    try:
        toplevel = repo.git.rev_parse("--show-toplevel")
    except GitCommandError:
        toplevel = ""
    return os.path.basename(toplevel or os.path.abspath(path))


def get_branch_label(repo: Repo) -> str:
    """Current branch name, or a detached HEAD description."""
    try:
        branch = repo.git.rev_parse("--abbrev-ref", "HEAD")
    except GitCommandError:
        return UNKNOWN_BRANCH

    if branch != DETACHED_HEAD:
        return branch

    try:
        short_hash = repo.git.rev_parse("--short", "HEAD")
    except GitCommandError:
        short_hash = UNKNOWN_BRANCH
    return f"HEAD detached at {short_hash}"


def describe_repository(repo: Repo, path: str) -> RepositoryInfo:
    """Build the RepositoryInfo for an opened repository."""
    return RepositoryInfo(display_name=get_display_name(repo, path), branch_label=get_branch_label(repo))


def inspect_repository(path: str) -> Optional[RepositoryInfo]:
    """Describe the repository at path, or return None if it should be skipped."""
    repo = open_repository(path)
    if repo is None:
        return None
    with repo:
        return describe_repository(repo, path)
