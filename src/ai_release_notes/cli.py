"""
Command Line Entry Point

Runs the release notes action from a GitHub Actions step or locally
with a YAML configuration file.
"""

import argparse
import sys
from typing import List, Optional

from .action import ReleaseNotesAction
from .config import AppConfig, configure_logging
from .runner import set_failed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-release-notes",
        description="Generate release notes for a pull request with a generative model.",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a YAML configuration file (default: read action inputs from the environment)",
    )
    parser.add_argument("--repository", type=str, help="Repository in owner/repo format")
    parser.add_argument("--pull-request-number", type=int, help="Pull request number")
    parser.add_argument("--language", type=str, help="Language code: en, ja, es, fr, de")
    parser.add_argument(
        "--publish-mode",
        choices=["body", "comment"],
        help="Write to the PR description or post a comment",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate and output release notes without updating the pull request",
    )
    parser.add_argument("--log-level", type=str, help="Logging level")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    config = AppConfig.from_yaml(args.config) if args.config else AppConfig.from_env()

    if args.repository:
        config.github.repository = args.repository
    if args.pull_request_number is not None:
        config.release_notes.pull_request_number = args.pull_request_number
    if args.language:
        config.release_notes.language = args.language.strip()
    if args.publish_mode:
        config.release_notes.publish_mode = args.publish_mode
    if args.dry_run:
        config.release_notes.dry_run = True
    if args.log_level:
        config.logging.level = args.log_level

    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
        config.validate()
        configure_logging(config.logging)
    except Exception as e:
        set_failed(f"Action failed with error: {e}")
        return 1

    result = ReleaseNotesAction(config).run()
    return 0 if result.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
