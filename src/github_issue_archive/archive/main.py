"""CLI entrypoint for the issue archive.

Reads identity from the environment, run options from the TOML config file, then archives
every issue into the output directory.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from github_issue_archive import __version__
from github_issue_archive.archive.config import DEFAULT_CONFIG_PATH, load_config
from github_issue_archive.archive.github.client import GitHubClient
from github_issue_archive.archive.logging import configure_logging
from github_issue_archive.archive.pipeline import DEFAULT_OUTPUT_ROOT, ArchivePipeline
from github_issue_archive.archive.settings import ArchiveSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="github-issue-archive",
        description="Archive GitHub issues as static-site markdown content",
    )
    parser.add_argument(
        "--version", action="version", version=f"github-issue-archive {__version__}"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to the TOML config file (missing or invalid files fall back to defaults)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_ROOT,
        help="Directory that receives <category>/<title>.md files",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ArchiveSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (set GITHUB_TOKEN and GITHUB_REPOSITORY):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)
    config = load_config(args.config)

    try:
        github = GitHubClient(
            token=settings.github_token,
            repository=settings.github_repository,
            base_url=config.base_url,
        )
        try:
            summary = ArchivePipeline(
                github=github, config=config, output_root=args.output_dir
            ).run()
        finally:
            github.close()
    except Exception:
        logger.exception("Archive run failed", extra={"repo": settings.github_repository})
        return 1

    if not summary.ok:
        for failure in summary.failures:
            print(
                f"Failed #{failure.issue_number} {failure.title!r}: {failure.error}",
                file=sys.stderr,
            )
        return 1

    print(f"Archived {len(summary.written)} issues to {args.output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
