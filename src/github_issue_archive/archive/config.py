"""Archive configuration file.

The config file is optional. A missing, unreadable or malformed file never stops
a run: the error is logged and every field falls back to its default.

Recognised keys (TOML):

    baseUrl = "https://github.example.com/api/v3"
    state = "all"                 # open | closed | all
    excludedLabels = ["P1", "triage"]
    enableEditUrl = true
    continueOnError = false
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("scripts/config.toml")
DEFAULT_BASE_URL = "https://api.github.com"

IssueState = Literal["open", "closed", "all"]


class ArchiveConfig(BaseModel):
    """Read-only run configuration, shared by every pipeline stage."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, alias="baseUrl")
    state: IssueState = Field(default="all")
    excluded_labels: tuple[str, ...] = Field(default=(), alias="excludedLabels")
    enable_edit_url: bool = Field(default=False, alias="enableEditUrl")
    continue_on_error: bool = Field(
        default=False,
        alias="continueOnError",
        description="Record per-issue failures and keep archiving instead of aborting",
    )


def load_config_mapping(path: Path) -> dict[str, Any]:
    """Read and decode the TOML file at `path`; return `{}` on any failure."""

    try:
        text = path.read_text(encoding="utf-8")
        return tomllib.loads(text)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.error(
            "Config file unavailable; using defaults",
            extra={"path": str(path), "error": str(e)},
        )
        return {}


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ArchiveConfig:
    """Load the archive configuration, degrading to defaults on any error."""

    raw = load_config_mapping(path)
    try:
        config = ArchiveConfig.model_validate(raw)
    except ValidationError as e:
        logger.error(
            "Config file has unexpected shape; using defaults",
            extra={"path": str(path), "error": str(e)},
        )
        return ArchiveConfig()

    logger.debug("Config loaded", extra={"path": str(path), "config": config.model_dump()})
    return config
