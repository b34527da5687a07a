"""
git-standup repository resolver node.

Turns the user's repository selection (an explicit list, a root directory to
search, or nothing at all) into an ordered list of candidate paths.
"""

import os
from typing import List, Optional

from loguru import logger

from gitstandup.config import ConfigurationError
from gitstandup.models.state import DigestState

GIT_DIR_NAME = ".git"
MAX_DISCOVERY_DEPTH = 3


def split_repo_list(repos: str) -> List[str]:
    """Split a comma-separated path list, keeping order and duplicates."""
    paths = []
    for entry in repos.split(","):
        entry = entry.strip()
        if entry:
            paths.append(os.path.expanduser(entry))
    return paths


def discover_repositories(root: str, max_depth: int = MAX_DISCOVERY_DEPTH) -> List[str]:
    """Find repositories whose `.git` directory sits at most max_depth levels below root.

    Matches are sorted by `.git` path so the output does not depend on
    filesystem listing order.
    """
    root = os.path.expanduser(root)
    if not os.path.isdir(root):
        raise ConfigurationError(f"--root path does not exist or is not a directory: {root}")

    git_dirs = []
    base_depth = root.rstrip(os.sep).count(os.sep)

    for dirpath, dirnames, _ in os.walk(root):
        # Entries of dirpath sit one level deeper than dirpath itself
        depth = dirpath.rstrip(os.sep).count(os.sep) - base_depth + 1
        if GIT_DIR_NAME in dirnames and not os.path.islink(os.path.join(dirpath, GIT_DIR_NAME)):
            git_dirs.append(os.path.join(dirpath, GIT_DIR_NAME))
        if depth >= max_depth:
            dirnames[:] = []
        else:
            dirnames[:] = [
                d for d in dirnames if d != GIT_DIR_NAME and not os.path.islink(os.path.join(dirpath, d))
            ]

    return [os.path.dirname(git_dir) for git_dir in sorted(git_dirs)]


def resolve_repositories(repos: Optional[str], root: Optional[str], cwd: Optional[str] = None) -> List[str]:
    """Resolve the candidate repository paths for a run.

    An explicit list wins over a root directory; with neither, the current
    working directory is the only candidate.
    """
    if repos and root:
        logger.warning("Both --repos and --root specified; --repos takes precedence.")

    if repos:
        return split_repo_list(repos)
    if root:
        return discover_repositories(root)
    return [cwd or os.getcwd()]


def resolve_node(state: DigestState) -> DigestState:
    """Resolve repository paths and update state."""
    logger.debug("Executing Resolve Node")

    config = state["digest_config"]
    repo_paths = resolve_repositories(config.repos, config.root, state.get("cwd"))

    logger.debug(f"Resolved {len(repo_paths)} candidate repositories")
    return {**state, "repo_paths": repo_paths}
