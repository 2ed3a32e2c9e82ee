"""GitHub Issue Archive.

Snapshots a repository's issue tracker into static-site content:
- one markdown file per issue, with YAML frontmatter
- files grouped into subdirectories derived from issue labels
- a single sequential batch run, safe to repeat
"""

__version__ = "0.1.0"

from github_issue_archive.archive.config import ArchiveConfig
from github_issue_archive.archive.settings import ArchiveSettings

__all__ = ["__version__", "ArchiveConfig", "ArchiveSettings"]
