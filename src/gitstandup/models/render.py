"""Types for rendering the digest."""

from dataclasses import dataclass
from enum import Enum


class OutputFormat(str, Enum):
    """Supported output styles."""

    TEXT = "text"  # terminal text, optionally ANSI colored
    TELEGRAM = "telegram"  # lite markup: *bold* and `code` spans

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        """Resolve a format name, accepting the 'plain' and 'lite-markup' aliases."""
        name = FORMAT_ALIASES.get(value, value)
        return cls(name)


FORMAT_ALIASES = {
    "plain": "text",
    "lite-markup": "telegram",
}


@dataclass(frozen=True)
class RenderOptions:
    """Options for controlling the rendering process."""

    output_format: OutputFormat = OutputFormat.TEXT
    color: bool = False  # only meaningful for OutputFormat.TEXT
