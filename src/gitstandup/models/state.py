"""
git-standup workflow state models for scan results and the final digest.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, TypedDict

from gitstandup.config import DigestConfig
from gitstandup.models.base import CommitRecord, RepositoryInfo


@dataclass(frozen=True)
class ScanResult:
    """Commits found in a single repository during one run."""

    info: RepositoryInfo
    commits: Tuple[CommitRecord, ...]


@dataclass(frozen=True)
class DigestReport:
    """Aggregated output of a full run, in repository scan order."""

    window_hours: int
    results: Tuple[ScanResult, ...]
    scanned_repo_count: int

    @property
    def total_commits(self) -> int:
        return sum(len(result.commits) for result in self.results)

    @property
    def active_repo_count(self) -> int:
        return len(self.results)


class DigestState(TypedDict, total=False):
    """State container passed between workflow nodes.

    total=False means all fields are optional; each node fills in its own.
    """

    # Input
    digest_config: DigestConfig
    cwd: str

    # Resolve Node Output
    repo_paths: List[str]  # Candidate repository paths, in resolution order

    # Scan Node Output
    report: DigestReport

    # Render Node Output
    rendered: str

    # Dispatch Node Output
    notified: Optional[bool]  # None when no notification was requested
