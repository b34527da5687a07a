"""Shared fixtures for git-standup tests."""

import sys
from pathlib import Path
from typing import List, Optional

import pytest
from git import Actor, Repo
from loguru import logger

AUTHOR = Actor("Ada Lovelace", "ada@example.com")

# 2020-01-01 12:00:00 UTC, in git's internal date format
OLD_DATE = "1577880000 +0000"


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo any sinks a test (or cli.main) installed."""
    yield
    logger.remove()
    logger.add(sys.__stderr__, level="INFO")


@pytest.fixture
def log_messages():
    """Capture loguru output as 'LEVEL: message' strings."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.rstrip("\n")), level="DEBUG", format="{level}: {message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def repo_factory(tmp_path):
    """Factory fixture for creating empty repositories under tmp_path."""

    def create_repo(name: str, bare: bool = False) -> Repo:
        repo_path = tmp_path / name
        repo_path.mkdir(parents=True)
        return Repo.init(repo_path, bare=bare)

    return create_repo


@pytest.fixture
def make_commit():
    """Factory fixture for committing a file change with a fixed author."""

    def create_commit(
        repo: Repo,
        message: str,
        date: Optional[str] = None,
        parent_commits: Optional[list] = None,
        head: bool = True,
    ):
        file_path = Path(repo.working_dir) / "notes.txt"
        file_path.write_text(message)
        repo.index.add([str(file_path)])

        dates = {"author_date": date, "commit_date": date} if date else {}
        return repo.index.commit(
            message,
            parent_commits=parent_commits,
            head=head,
            author=AUTHOR,
            committer=AUTHOR,
            **dates,
        )

    return create_commit


@pytest.fixture
def active_repo(repo_factory, make_commit):
    """Repository with one old commit, two recent commits and a recent merge."""
    repo = repo_factory("active")
    base = make_commit(repo, "Initial commit", date=OLD_DATE)
    side = make_commit(repo, "Add feature A", parent_commits=[base], head=False)
    main = make_commit(repo, "Fix bug B")
    make_commit(repo, "Merge feature A", parent_commits=[main, side])
    return repo
