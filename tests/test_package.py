"""Packaging checks for the git-standup distribution."""

from importlib import metadata


def test_version():
    """The installed distribution reports the version declared in pyproject.toml."""
    version = metadata.version("git-standup")
    assert version == "0.1.0"
