"""Unit tests for the filesystem sink."""

from __future__ import annotations

from pathlib import Path

import pytest

from github_issue_archive.archive.sink import (
    MAX_FILENAME_BYTES,
    sanitize_filename,
    write_document,
)


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Bug: crash on load", "Bug- crash on load"),
        ("a/b\\c", "a-b-c"),
        ('What? <why> "now" *|*', "What- -why- -now- ---"),
        ("tab\there", "tab-here"),
        ("Trailing dots...", "Trailing dots"),
        ("CON", "_CON"),
        ("..", "untitled"),
        ("", "untitled"),
        ("Plain title", "Plain title"),
    ],
)
def test_sanitize_filename(title: str, expected: str) -> None:
    assert sanitize_filename(title) == expected


def test_sanitize_filename_caps_length_on_character_boundary() -> None:
    name = sanitize_filename("é" * 500)

    assert len(name.encode("utf-8")) <= MAX_FILENAME_BYTES
    assert set(name) == {"é"}


def test_write_document_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "content" / "posts" / "bug" / "Issue.md"

    returned = write_document(path, "hello")

    assert returned == path
    assert path.read_text(encoding="utf-8") == "hello"


def test_write_document_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "general" / "Same.md"
    path.parent.mkdir()
    path.write_text("a much longer original document", encoding="utf-8")

    write_document(path, "short")

    assert path.read_text(encoding="utf-8") == "short"


def test_write_document_is_idempotent(tmp_path: Path) -> None:
    path = tmp_path / "docs" / "Twice.md"

    write_document(path, "same content")
    write_document(path, "same content")

    assert path.read_text(encoding="utf-8") == "same content"
    assert [p.name for p in path.parent.iterdir()] == ["Twice.md"]


def test_write_document_propagates_filesystem_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "bug"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OSError):
        write_document(blocker / "Issue.md", "text")
