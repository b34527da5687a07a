"""Command line entry point for git-standup."""

import argparse
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from gitstandup.config import ConfigurationError, DigestConfig, color_disabled_by_env, load_env_defaults
from gitstandup.tools import check_prerequisites

EPILOG = """\
notes:
  - If neither --repos nor --root is given, the current directory is used.
  - --repos and --root are mutually exclusive; --repos takes precedence.
  - --notify uses telegram-safe output regardless of --format.
  - Merge commits are excluded.
  - Repos with no commits in the window are silently skipped.

examples:
  git-standup --hours 48 --root ~/code
  git-standup --repos ~/projects/api,~/projects/web --format telegram
  git-standup --hours 8 --notify
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-standup",
        description="Daily git activity digest across multiple repositories.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--hours", metavar="N", help="Look back N hours (default: 24)")
    parser.add_argument("--repos", metavar="p1,p2,...", help="Comma-separated list of repo paths to scan")
    parser.add_argument("--root", metavar="/path", help="Auto-discover git repos under this directory (maxdepth 3)")
    parser.add_argument(
        "--format",
        dest="output_format",
        metavar="FORMAT",
        help="Output format: text (default) or telegram",
    )
    parser.add_argument(
        "--notify",
        action="store_true",
        help="Send output via: openclaw system event --text MSG --mode now",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in text output")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def _log_format(record) -> str:
    if record["level"].name == "INFO":
        return "{message}\n{exception}"
    return "{level}: {message}\n{exception}"


def configure_logging(verbose: bool = False) -> None:
    """Send log output to stderr; --verbose adds debug detail."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=_log_format)


def _warn_ignored(extras: List[str]) -> None:
    for arg in extras:
        if arg == "--":
            continue
        if arg.startswith("--"):
            logger.warning(f"Unknown flag '{arg}' (ignored)")
        else:
            logger.warning(f"Unexpected argument '{arg}' (ignored)")


def main(argv: Optional[List[str]] = None) -> int:
    args, extras = build_parser().parse_known_args(argv)
    configure_logging(args.verbose)
    _warn_ignored(extras)

    load_dotenv(find_dotenv(usecwd=True))
    values = load_env_defaults()
    # --repos and --root select repositories together; either flag replaces both env defaults
    if args.repos is not None or args.root is not None:
        values.pop("repos", None)
        values.pop("root", None)
    for name in ("hours", "repos", "root", "output_format"):
        value = getattr(args, name)
        if value is not None:
            values[name] = value

    color = not args.no_color and not color_disabled_by_env() and sys.stdout.isatty()

    try:
        config = DigestConfig.build(**values, notify=args.notify, color=color)
        check_prerequisites(config)

        # GitPython looks for the git executable on import
        from gitstandup.workflow import run_workflow

        run_workflow(config)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
