"""Run configuration for git-standup.

Values come from command line flags, falling back to ``GIT_STANDUP_*``
environment variables (a ``.env`` file is loaded by the CLI), then to the
defaults below.
"""

import os
import re
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator, model_validator

from gitstandup.models.render import OutputFormat, RenderOptions

DEFAULT_HOURS = 24
DEFAULT_NOTIFY_BIN = "openclaw"

ENV_PREFIX = "GIT_STANDUP_"
ENV_FIELDS = {
    "HOURS": "hours",
    "REPOS": "repos",
    "ROOT": "root",
    "FORMAT": "output_format",
    "NOTIFY_BIN": "notify_bin",
}

_POSITIVE_INT = re.compile(r"[1-9][0-9]*")


class ConfigurationError(Exception):
    """Raised for invalid input that must be fixed before a run can start."""

    pass


class DigestConfig(BaseModel):
    """Validated settings for a single digest run."""

    hours: int = Field(DEFAULT_HOURS, description="Look back window in hours")
    repos: Optional[str] = Field(None, description="Comma-separated repository paths")
    root: Optional[str] = Field(None, description="Directory to auto-discover repositories under")
    output_format: OutputFormat = Field(OutputFormat.TEXT, description="Output style")
    notify: bool = Field(False, description="Forward the digest to the notification sink")
    color: bool = Field(False, description="Use ANSI colors in text output")
    notify_bin: str = Field(DEFAULT_NOTIFY_BIN, description="Notification sink executable")

    @field_validator("hours", mode="before")
    @classmethod
    def validate_hours(cls, value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        if isinstance(value, str) and _POSITIVE_INT.fullmatch(value):
            return int(value)
        raise ValueError(f"--hours must be a positive integer (got: {value})")

    @field_validator("repos", "root")
    @classmethod
    def validate_selection(cls, value: Optional[str], info: ValidationInfo) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError(f"--{info.field_name} requires a value")
        return value

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_format(cls, value: Any) -> OutputFormat:
        if isinstance(value, OutputFormat):
            return value
        try:
            return OutputFormat.parse(str(value))
        except ValueError:
            raise ValueError(f"--format must be 'text' or 'telegram' (got: {value})") from None

    @model_validator(mode="after")
    def apply_notify(self) -> "DigestConfig":
        # Notification sinks do not render ANSI escapes
        if self.notify:
            self.output_format = OutputFormat.TELEGRAM
            self.color = False
        return self

    @classmethod
    def build(cls, **values: Any) -> "DigestConfig":
        """Validate values, dropping unset ones, and raise ConfigurationError on failure."""
        try:
            return cls(**{key: value for key, value in values.items() if value is not None})
        except ValidationError as e:
            error = e.errors()[0]
            original = error.get("ctx", {}).get("error")
            raise ConfigurationError(str(original) if original else error["msg"]) from None

    @property
    def render_options(self) -> RenderOptions:
        return RenderOptions(output_format=self.output_format, color=self.color)


def load_env_defaults(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Collect non-empty GIT_STANDUP_* variables as DigestConfig field values."""
    environ = os.environ if environ is None else environ
    defaults = {}
    for suffix, field_name in ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix, "").strip()
        if value:
            defaults[field_name] = value
    return defaults


def color_disabled_by_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Honor the NO_COLOR convention (any non-empty value)."""
    environ = os.environ if environ is None else environ
    return bool(environ.get("NO_COLOR"))
