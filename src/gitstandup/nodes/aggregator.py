"""Accumulates per-repository scan output into a DigestReport."""

from typing import List, Sequence

from gitstandup.models.base import CommitRecord, RepositoryInfo
from gitstandup.models.state import DigestReport, ScanResult


class DigestAccumulator:
    """Running totals for one digest run.

    Results are kept in the order they are added; repositories without
    commits contribute nothing but still count as scanned.
    """

    def __init__(self, window_hours: int):
        self.window_hours = window_hours
        self.scanned_repo_count = 0
        self._results: List[ScanResult] = []

    def mark_scanned(self) -> None:
        """Count a candidate repository, whether or not it produced commits."""
        self.scanned_repo_count += 1

    def add(self, info: RepositoryInfo, commits: Sequence[CommitRecord]) -> None:
        """Record the commits found in one repository."""
        if not commits:
            return
        self._results.append(ScanResult(info=info, commits=tuple(commits)))

    def build(self) -> DigestReport:
        """Freeze the accumulated results into a report."""
        return DigestReport(
            window_hours=self.window_hours,
            results=tuple(self._results),
            scanned_repo_count=self.scanned_repo_count,
        )
