"""GitHub API client wrapper.

This intentionally wraps PyGithub to keep GitHub calls out of pipeline code and make tests easy.
Everything returned from here is a plain, normalized record: labels are bare names, timestamps
are timezone-aware, and pull requests are flagged rather than filtered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlparse

from github import Auth, Github
from github.Repository import Repository

logger = logging.getLogger(__name__)

PER_PAGE = 100


@dataclass(frozen=True, slots=True)
class IssueRecord:
    """Issue fields needed to render an archive document."""

    number: int
    title: str
    body: str | None
    created_at: datetime
    updated_at: datetime
    labels: tuple[str, ...]
    html_url: str
    is_pull_request: bool = False


@dataclass(frozen=True, slots=True)
class CommentRecord:
    """A single issue comment. Only the body is archived."""

    body: str | None


def label_name(label: object) -> str:
    """Return the name of a label given as a string, a mapping or a Label object."""

    if isinstance(label, str):
        return label
    if isinstance(label, dict):
        name = label.get("name")
    else:
        name = getattr(label, "name", None)
    if not isinstance(name, str):
        raise ValueError(f"Label has no name: {label!r}")
    return name


def normalize_labels(labels: Iterable[object] | None) -> tuple[str, ...]:
    """Normalize labels to names, preserving source order."""

    return tuple(label_name(label) for label in labels or ())


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def is_pull_request_url(html_url: str) -> bool:
    """Return True when an issues-API web URL points at a pull request."""

    return "/pull/" in urlparse(html_url).path


def issue_record_from_api(issue: Any) -> IssueRecord:
    """Build an `IssueRecord` from a PyGithub `Issue` (or anything shaped like one).

    Only fields present in the list response are read; touching an unset attribute such as
    `pull_request` would make PyGithub fetch the full issue.
    """

    return IssueRecord(
        number=issue.number,
        title=issue.title,
        body=issue.body,
        created_at=_as_utc(issue.created_at),
        updated_at=_as_utc(issue.updated_at),
        labels=normalize_labels(issue.labels),
        html_url=issue.html_url,
        is_pull_request=is_pull_request_url(issue.html_url),
    )


class GitHubClient:
    """Small wrapper around PyGithub for the read-only calls the archive needs."""

    def __init__(
        self,
        *,
        token: str,
        repository: str,
        base_url: str = "https://api.github.com",
        per_page: int = PER_PAGE,
        repo: Repository | None = None,
        github_api: Github | None = None,
    ) -> None:
        if not token:
            raise ValueError("GitHub token is required")
        if not repository:
            raise ValueError("GitHub repository is required")

        self._repository_name = repository.strip().strip("/")

        if repo is not None:
            self._repo = repo
            self._github = None
            logger.debug("Using injected Repository instance")
            return

        auth = Auth.Token(token)
        # Lazy objects: `get_issue(n).get_comments()` must not re-fetch the issue itself.
        self._github = github_api or Github(
            auth=auth,
            base_url=base_url.rstrip("/"),
            per_page=per_page,
            lazy=True,
        )

        self._repo = self._github.get_repo(self._repository_name)
        logger.info(
            "Authenticated with GitHub",
            extra={"repo": self._repository_name, "base_url": base_url},
        )

    @property
    def repository(self) -> str:
        """Return the configured repository name ("owner/repo")."""

        return self._repository_name

    def iter_issue_pages(self, *, state: str = "all") -> Iterator[list[IssueRecord]]:
        """Yield issues one page at a time, starting from the first page.

        The generator is lazy: each page is requested only when the previous one has been
        consumed. It stops at the first empty page. Pull requests are included and flagged.
        """

        paginated = self._repo.get_issues(state=state)
        page = 0
        while True:
            logger.debug("Fetching issue page", extra={"page": page + 1, "state": state})
            raw_issues = paginated.get_page(page)
            if not raw_issues:
                return
            yield [issue_record_from_api(issue) for issue in raw_issues]
            page += 1

    def list_comments(self, *, issue_number: int) -> list[CommentRecord]:
        """Return every comment on an issue, in the order GitHub returns them."""

        if issue_number <= 0:
            raise ValueError("issue_number must be a positive integer")

        logger.debug("Fetching comments", extra={"issue_number": issue_number})
        comments = self._repo.get_issue(issue_number).get_comments()
        return [CommentRecord(body=comment.body) for comment in comments]

    def close(self) -> None:
        if self._github is not None:
            self._github.close()
