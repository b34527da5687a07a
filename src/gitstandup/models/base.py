"""Base types used across the git-standup system."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

# Fields: short hash, author name, relative date, subject
LOG_FORMAT = "%h%x09%an%x09%ar%x09%s"


@dataclass(frozen=True)
class RepositoryInfo:
    """Display information about a single repository."""

    display_name: str
    branch_label: str


class CommitRecord(BaseModel):
    """Structured representation of a non-merge commit in the digest window."""

    model_config = ConfigDict(frozen=True)

    short_hash: str = Field(..., description="Abbreviated commit hash")
    author: str = Field(..., description="The commit author's name")
    relative_time: str = Field(..., description="Human relative commit age, e.g. '2 hours ago'")
    subject: str = Field(..., description="First line of the commit message")

    @classmethod
    def from_log_line(cls, line: str) -> "CommitRecord":
        """Create a CommitRecord from one line of `git log --format=LOG_FORMAT`."""
        parts = line.split("\t", 3)
        if len(parts) != 4:
            raise ValueError(f"Expected 4 tab-separated fields, got {len(parts)}: {line!r}")

        short_hash, author, relative_time, subject = parts
        return cls(
            short_hash=short_hash,
            author=author,
            relative_time=relative_time,
            subject=subject,
        )
