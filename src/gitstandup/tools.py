"""Startup checks for the external programs git-standup relies on."""

import shutil
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from gitstandup.config import ConfigurationError, DigestConfig

GIT_BIN = "git"


@dataclass(frozen=True)
class ToolAvailability:
    """Result of looking up an executable on PATH."""

    name: str
    path: Optional[str]

    @property
    def available(self) -> bool:
        return self.path is not None


def check_tool(name: str) -> ToolAvailability:
    """Look up an executable on PATH."""
    return ToolAvailability(name=name, path=shutil.which(name))


def check_prerequisites(config: DigestConfig) -> None:
    """Fail before any scanning if a required program is missing."""
    git = check_tool(GIT_BIN)
    if not git.available:
        raise ConfigurationError("git is not installed or not in PATH")
    logger.debug(f"Using git at {git.path}")

    if config.notify:
        notifier = check_tool(config.notify_bin)
        if not notifier.available:
            raise ConfigurationError(f"{config.notify_bin} not found in PATH; required for --notify")
        logger.debug(f"Using {config.notify_bin} at {notifier.path}")
