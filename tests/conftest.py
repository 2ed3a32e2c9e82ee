"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import pytest

from github_issue_archive.archive.config import ArchiveConfig
from github_issue_archive.archive.github.client import IssueRecord

IssueFactory = Callable[..., IssueRecord]


@pytest.fixture
def make_issue() -> IssueFactory:
    """Provide a factory for issue records with sensible defaults."""

    def _make(**overrides: Any) -> IssueRecord:
        number = overrides.pop("number", 42)
        fields: dict[str, Any] = {
            "number": number,
            "title": "Bug: crash on load",
            "body": "It crashes.",
            "created_at": datetime(2024, 1, 5, 10, 0, tzinfo=UTC),
            "updated_at": datetime(2024, 1, 6, 8, 30, tzinfo=UTC),
            "labels": ("bug", "P1"),
            "html_url": f"https://github.com/octo-org/octo-repo/issues/{number}",
            "is_pull_request": False,
        }
        fields.update(overrides)
        return IssueRecord(**fields)

    return _make


@pytest.fixture
def archive_config() -> ArchiveConfig:
    """Provide a config that keeps the P1 priority label out of routing."""
    return ArchiveConfig(excluded_labels=("P1",))
