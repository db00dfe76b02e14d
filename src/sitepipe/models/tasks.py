"""Per-task configuration records (generation, deploy, cleanup)."""

from __future__ import annotations

import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BOOK_DIR = "_book"

GITHUB_SLUG = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


def _default_generate_command() -> List[str]:
    return [
        "gitbook",
        "build",
        "${params.input}",
        "${params.dest}",
        "--format=${params.format}",
    ]


class GenerationConfig(BaseModel):
    """Documentation-site generation settings."""

    model_config = ConfigDict(frozen=True)

    input: str = "./src"
    dest: Optional[str] = None
    format: str = "site"
    title: str
    description: str = ""
    github: str
    command: List[str] = Field(default_factory=_default_generate_command)

    @field_validator("github")
    @classmethod
    def github_slug(cls, v: str) -> str:
        """Require an ``owner/name`` repository slug."""

        if not GITHUB_SLUG.match(v):
            raise ValueError(f"Invalid GitHub repository slug: {v!r}")
        return v

    @field_validator("command")
    @classmethod
    def command_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("command must include at least one argument")
        return v

    def resolved_dest(self) -> str:
        """Output directory, falling back to the generator's ``_book`` default."""

        return self.dest if self.dest else DEFAULT_BOOK_DIR


class DeployConfig(BaseModel):
    """Static-site publish settings (gh-pages branch)."""

    model_config = ConfigDict(frozen=True)

    base: str
    src: List[str] = Field(default_factory=lambda: ["**"])
    branch: str = "gh-pages"
    remote: str = "origin"
    message: str = "Updates"
    push: bool = True
    dotfiles: bool = False
    command: Optional[List[str]] = None

    @field_validator("src", mode="before")
    @classmethod
    def src_as_list(cls, v):
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("src")
    @classmethod
    def src_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("src must include at least one pattern")
        return v


class CleanupConfig(BaseModel):
    """Paths removed before a fresh build."""

    model_config = ConfigDict(frozen=True)

    paths: List[str]
    force: bool = False

    @field_validator("paths", mode="before")
    @classmethod
    def paths_as_list(cls, v):
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("paths")
    @classmethod
    def paths_not_empty(cls, v: List[str]) -> List[str]:
        if not v or any(not p.strip() for p in v):
            raise ValueError("paths must be non-empty strings")
        return v


__all__ = [
    "DEFAULT_BOOK_DIR",
    "CleanupConfig",
    "DeployConfig",
    "GenerationConfig",
]
