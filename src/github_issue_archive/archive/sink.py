"""Filesystem output for archive documents."""

from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_FILENAME_BYTES = 200
UNTITLED = "untitled"

_ILLEGAL = re.compile(r'[/\\?<>:*|"\x00-\x1f\x80-\x9f]')
_WINDOWS_RESERVED = re.compile(r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE)


def sanitize_filename(title: str, replacement: str = "-") -> str:
    """Turn free text into a single path segment (without extension).

    Characters illegal in file names are replaced; the result is not guaranteed to be unique.
    """

    name = _ILLEGAL.sub(replacement, title)
    name = name.rstrip(". ")
    if name in {"", ".", ".."}:
        return UNTITLED
    if _WINDOWS_RESERVED.match(name):
        name = f"_{name}"

    encoded = name.encode("utf-8")
    if len(encoded) > MAX_FILENAME_BYTES:
        name = encoded[:MAX_FILENAME_BYTES].decode("utf-8", errors="ignore").rstrip(". ")
    return name or UNTITLED


def write_document(path: Path, text: str) -> Path:
    """Write `text` to `path`, creating parent directories and replacing any existing file."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.debug("Document written", extra={"path": str(path), "bytes": len(text)})
    return path
