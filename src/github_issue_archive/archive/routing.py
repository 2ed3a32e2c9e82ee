"""Label-driven routing of issues into output subdirectories.

An issue lands in the directory named after its first label that is not excluded, normalized
so it is always a single safe path segment. Issues with no usable label go to `general`.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence

FALLBACK_CATEGORY = "general"

_WHITESPACE_RUN = re.compile(r"\s+")
_DISALLOWED = re.compile(r"[^a-z0-9-]")


def normalize_category(label: str) -> str:
    """Lowercase, hyphenate whitespace runs and drop anything outside `[a-z0-9-]`."""

    slug = _WHITESPACE_RUN.sub("-", label.lower())
    return _DISALLOWED.sub("", slug)


def route(labels: Sequence[str], excluded: Collection[str] = ()) -> str:
    """Return the output category for an issue's labels.

    Labels keep their source order; the first non-excluded one wins.
    """

    for label in labels:
        if label in excluded:
            continue
        return normalize_category(label) or FALLBACK_CATEGORY
    return FALLBACK_CATEGORY
