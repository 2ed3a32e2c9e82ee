"""Render an issue and its comments as a static-site markdown document.

Layout:

    ---
    title: ...
    date: 2024-01-05
    lastMod: 2024-01-06
    tags:
    - bug
    editURL: https://github.com/...   (only when enabled)
    ---

    <issue body>

    <comment 1>

    <comment 2>
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, date, datetime
from typing import Any

import yaml

from github_issue_archive.archive.config import ArchiveConfig
from github_issue_archive.archive.github.client import CommentRecord, IssueRecord

FRONTMATTER_DELIMITER = "---"
SECTION_SEPARATOR = "\n\n"


class MissingContent(Exception):
    """Raised when an issue has no body to archive."""

    def __init__(self, issue_number: int) -> None:
        super().__init__(f"Issue #{issue_number} has no body")
        self.issue_number = issue_number


def _utc_date(value: datetime) -> date:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).date()


def build_frontmatter(issue: IssueRecord, config: ArchiveConfig) -> dict[str, Any]:
    """Return the frontmatter mapping in its rendered key order."""

    frontmatter: dict[str, Any] = {
        "title": issue.title,
        "date": _utc_date(issue.created_at),
        "lastMod": _utc_date(issue.updated_at),
        "tags": list(issue.labels),
    }
    if config.enable_edit_url:
        frontmatter["editURL"] = issue.html_url
    return frontmatter


def render_frontmatter(frontmatter: dict[str, Any]) -> str:
    dumped = yaml.safe_dump(
        frontmatter,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
    return f"{FRONTMATTER_DELIMITER}\n{dumped}{FRONTMATTER_DELIMITER}"


def render_body(issue: IssueRecord, comments: Sequence[CommentRecord]) -> str:
    if issue.body is None:
        raise MissingContent(issue.number)

    sections = [issue.body.strip()]
    if comments:
        sections.append(SECTION_SEPARATOR.join(c.body or "" for c in comments))
    return SECTION_SEPARATOR.join(sections)


def assemble_document(
    issue: IssueRecord,
    comments: Sequence[CommentRecord],
    config: ArchiveConfig,
) -> str:
    """Assemble the full document text for one issue.

    Raises:
        MissingContent: If the issue body is absent.
    """

    body = render_body(issue, comments)
    frontmatter = render_frontmatter(build_frontmatter(issue, config))
    return f"{frontmatter}{SECTION_SEPARATOR}{body}".strip()


def parse_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Split a rendered document back into (frontmatter mapping, body).

    Returns ({}, text) when the document has no frontmatter block.
    """

    lines = text.split("\n")
    if not lines or lines[0] != FRONTMATTER_DELIMITER:
        return {}, text
    try:
        end = lines.index(FRONTMATTER_DELIMITER, 1)
    except ValueError:
        return {}, text

    metadata = yaml.safe_load("\n".join(lines[1:end])) or {}
    body = "\n".join(lines[end + 1 :]).strip()
    return metadata, body
