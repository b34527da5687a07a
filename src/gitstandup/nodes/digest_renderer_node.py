"""Digest Renderer Node for converting scan results into the final report text."""

from dataclasses import dataclass
from typing import List

from loguru import logger

from gitstandup.models.base import CommitRecord
from gitstandup.models.render import OutputFormat, RenderOptions
from gitstandup.models.state import DigestReport, DigestState, ScanResult

COLOR_SEPARATOR = "━" * 49
PLAIN_SEPARATOR = "─" * 49
TELEGRAM_SEPARATOR = "─" * 33


@dataclass(frozen=True)
class Palette:
    """ANSI escape codes for text output; all empty when color is off."""

    bold: str = ""
    cyan: str = ""
    yellow: str = ""
    dim: str = ""
    reset: str = ""
    separator: str = PLAIN_SEPARATOR


ANSI_PALETTE = Palette(
    bold="\033[1m",
    cyan="\033[0;36m",
    yellow="\033[1;33m",
    dim="\033[2m",
    reset="\033[0m",
    separator=COLOR_SEPARATOR,
)
NO_COLOR_PALETTE = Palette()


def _format_text_section(result: ScanResult, p: Palette) -> List[str]:
    """Format one repository section for terminal output."""
    lines = [
        "",
        f"{p.cyan}{p.separator}{p.reset}",
        f"{p.bold}{result.info.display_name}{p.reset}  {p.dim}[branch: {result.info.branch_label}]{p.reset}",
        f"{p.cyan}{p.separator}{p.reset}",
    ]
    for commit in result.commits:
        lines.append(f"  {p.yellow}{commit.short_hash}{p.reset}  {commit.author}  {p.dim}{commit.relative_time}{p.reset}")
        lines.append(f"  {commit.subject}")
        lines.append("")
    return lines


def _format_telegram_commit(commit: CommitRecord) -> List[str]:
    return [
        f"`{commit.short_hash}`  {commit.author}  {commit.relative_time}",
        f"  {commit.subject}",
        "",
    ]


def _format_telegram_section(result: ScanResult) -> List[str]:
    """Format one repository section with lite markup."""
    lines = [
        "",
        f"*{result.info.display_name}* [{result.info.branch_label}]",
        TELEGRAM_SEPARATOR,
    ]
    for commit in result.commits:
        lines.extend(_format_telegram_commit(commit))
    return lines


def _no_commits_message(report: DigestReport) -> str:
    return f"No commits found in the last {report.window_hours}h across {report.scanned_repo_count} repo(s)."


def _total_message(report: DigestReport) -> str:
    return (
        f"Total: {report.total_commits} commit(s) across {report.active_repo_count} repo(s) "
        f"(last {report.window_hours}h)"
    )


def _format_footer(report: DigestReport, options: RenderOptions, p: Palette) -> List[str]:
    """Format the closing summary, or the empty-window notice."""
    telegram = options.output_format == OutputFormat.TELEGRAM

    if not report.results:
        if telegram:
            return [_no_commits_message(report)]
        return [f"{p.dim}{_no_commits_message(report)}{p.reset}"]

    if telegram:
        return [TELEGRAM_SEPARATOR, _total_message(report)]
    return [f"{p.cyan}{p.separator}{p.reset}", f"{p.bold}{_total_message(report)}{p.reset}"]


def render_digest(report: DigestReport, options: RenderOptions) -> str:
    """Render a digest report in the requested output format.

    The result never starts with a blank line and carries no trailing
    newline.
    """
    palette = ANSI_PALETTE if options.color else NO_COLOR_PALETTE

    lines: List[str] = []
    for result in report.results:
        if options.output_format == OutputFormat.TELEGRAM:
            lines.extend(_format_telegram_section(result))
        else:
            lines.extend(_format_text_section(result, palette))
    lines.extend(_format_footer(report, options, palette))

    if lines and lines[0] == "":
        lines = lines[1:]
    return "\n".join(lines)


def render_node(state: DigestState) -> DigestState:
    """Render the digest report and update state."""
    logger.debug("Executing Render Node")

    rendered = render_digest(state["report"], state["digest_config"].render_options)
    return {**state, "rendered": rendered}
