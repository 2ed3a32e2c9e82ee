"""Environment settings for the archive run.

Settings are loaded from:
- environment variables
- and a local `.env` file (if present)

Both the token and the repository identifier are required; the archive never
starts without them. Everything else about a run lives in the TOML config file
(see `github_issue_archive.archive.config`).
"""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArchiveSettings(BaseSettings):
    """Settings for a single archive run.

    Environment variables:
    - GITHUB_TOKEN
    - GITHUB_REPOSITORY  ("owner/repo")
    - LOG_LEVEL          (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `ArchiveSettings(_env_file=path_to_env)`.
    """

    # Defaults are intentionally empty, but validation below enforces that values are provided.
    github_token: str = Field(
        default="",
        validation_alias="GITHUB_TOKEN",
        description="GitHub token used for API authentication",
    )
    github_repository: str = Field(
        default="",
        validation_alias="GITHUB_REPOSITORY",
        description="Repository to archive, in the form 'owner/repo'",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("github_repository")
    @classmethod
    def _normalize_repository(cls, value: str) -> str:
        return value.strip().strip("/")

    @model_validator(mode="after")
    def _require_identity(self) -> ArchiveSettings:
        if not self.github_token.strip():
            raise ValueError("GITHUB_TOKEN is required")
        if not self.github_repository:
            raise ValueError("GITHUB_REPOSITORY is required")
        owner, _, repo = self.github_repository.partition("/")
        if not owner or not repo or "/" in repo:
            raise ValueError(
                "GITHUB_REPOSITORY must be in the form 'owner/repo', "
                f"got {self.github_repository!r}"
            )
        return self
