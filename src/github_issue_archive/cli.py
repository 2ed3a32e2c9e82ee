"""Console entrypoint shim; allows `python -m github_issue_archive.cli`.

The CLI itself lives in `github_issue_archive.archive.main`.
"""

from __future__ import annotations

from github_issue_archive.archive.main import main

__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
