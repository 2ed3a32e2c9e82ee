"""Sequential issue archive pipeline.

listing -> (per issue: fetch comments -> route -> assemble -> write) -> next page -> done

One issue is fully written before the next is started. A failure while listing issues always
aborts the run. A failure inside a single issue aborts too, unless the config opts into
`continue_on_error`, in which case it is recorded on the summary and the run moves on.

Two issues whose titles sanitize to the same file name in the same category overwrite each
other; the later issue wins. Such collisions are logged and reported, never renamed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from github import GithubException

from github_issue_archive.archive.config import ArchiveConfig
from github_issue_archive.archive.document import MissingContent, assemble_document
from github_issue_archive.archive.github.client import GitHubClient, IssueRecord
from github_issue_archive.archive.routing import route
from github_issue_archive.archive.sink import sanitize_filename, write_document

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_ROOT = Path("content/posts")
DOCUMENT_SUFFIX = ".md"

# Per-issue failures that `continue_on_error` may contain; anything else is a bug and propagates.
ISSUE_FAILURES: tuple[type[Exception], ...] = (GithubException, MissingContent, OSError)


@dataclass(frozen=True, slots=True)
class RoutedDocument:
    """A rendered document and where it belongs under the output root."""

    category: str
    filename: str
    text: str

    @property
    def relative_path(self) -> Path:
        return Path(self.category) / self.filename


@dataclass(frozen=True, slots=True)
class IssueFailure:
    issue_number: int
    title: str
    error: str


@dataclass(slots=True)
class ArchiveSummary:
    """What a run produced."""

    written: list[Path] = field(default_factory=list)
    failures: list[IssueFailure] = field(default_factory=list)
    collisions: list[Path] = field(default_factory=list)
    skipped_pull_requests: int = 0

    @property
    def ok(self) -> bool:
        return not self.failures


def document_filename(title: str) -> str:
    return f"{sanitize_filename(title)}{DOCUMENT_SUFFIX}"


class ArchivePipeline:
    """Archive every issue of one repository into `output_root`."""

    def __init__(
        self,
        *,
        github: GitHubClient,
        config: ArchiveConfig,
        output_root: Path = DEFAULT_OUTPUT_ROOT,
    ) -> None:
        self._github = github
        self._config = config
        self._output_root = output_root

    def render(self, issue: IssueRecord) -> RoutedDocument:
        """Fetch comments for `issue` and build its document (no filesystem access)."""

        comments = self._github.list_comments(issue_number=issue.number)
        category = route(issue.labels, self._config.excluded_labels)
        text = assemble_document(issue, comments, self._config)
        return RoutedDocument(
            category=category,
            filename=document_filename(issue.title),
            text=text,
        )

    def archive_issue(self, issue: IssueRecord) -> Path:
        document = self.render(issue)
        return write_document(self._output_root / document.relative_path, document.text)

    def run(self) -> ArchiveSummary:
        summary = ArchiveSummary()
        seen: set[Path] = set()

        logger.info(
            "Archive run started",
            extra={
                "repo": self._github.repository,
                "state": self._config.state,
                "output_root": str(self._output_root),
            },
        )

        for page_number, issues in enumerate(
            self._github.iter_issue_pages(state=self._config.state), start=1
        ):
            logger.info("Issue page fetched", extra={"page": page_number, "count": len(issues)})

            for issue in issues:
                if issue.is_pull_request:
                    summary.skipped_pull_requests += 1
                    continue

                logger.info(
                    "Processing issue",
                    extra={"issue_number": issue.number, "title": issue.title},
                )
                try:
                    path = self.archive_issue(issue)
                except ISSUE_FAILURES as e:
                    logger.error(
                        "Failed to archive issue",
                        extra={"issue_number": issue.number, "page": page_number},
                        exc_info=True,
                    )
                    if not self._config.continue_on_error:
                        raise
                    summary.failures.append(
                        IssueFailure(issue_number=issue.number, title=issue.title, error=str(e))
                    )
                    continue

                if path in seen:
                    logger.warning(
                        "Document path collision; earlier issue overwritten",
                        extra={"issue_number": issue.number, "path": str(path)},
                    )
                    summary.collisions.append(path)
                seen.add(path)
                summary.written.append(path)
                logger.info("Saved issue", extra={"issue_number": issue.number, "path": str(path)})

        logger.info(
            "Archive run finished",
            extra={
                "written": len(summary.written),
                "failed": len(summary.failures),
                "collisions": len(summary.collisions),
                "skipped_pull_requests": summary.skipped_pull_requests,
            },
        )
        return summary
