"""Root pipeline configuration model."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .tasks import CleanupConfig, DeployConfig, GenerationConfig

TASK_NAMES = ("cleanup", "generation", "deploy")


def _default_pipelines() -> Dict[str, List[str]]:
    return {
        "default": ["generation"],
        "publish": ["cleanup", "generation", "deploy"],
    }


class Config(BaseModel):
    """Static configuration for one site: task settings plus named pipelines."""

    model_config = ConfigDict(frozen=True)

    name: str
    workdir: Path = Field(default_factory=Path.cwd)
    generation: GenerationConfig
    deploy: DeployConfig
    cleanup: CleanupConfig
    pipelines: Dict[str, List[str]] = Field(default_factory=_default_pipelines)

    @field_validator("workdir")
    @classmethod
    def workdir_absolute(cls, v: Path) -> Path:
        """Anchor a relative working directory to the current directory once."""

        return Path(os.path.abspath(v))

    @field_validator("pipelines")
    @classmethod
    def steps_known(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        """Ensure every pipeline step names a configured task."""

        for name, steps in v.items():
            unknown = [s for s in steps if s not in TASK_NAMES]
            if unknown:
                raise ValueError(
                    f"Pipeline {name!r} refers to unknown task(s): {', '.join(unknown)}"
                )
        return v

    def resolve(self, path: str | Path) -> Path:
        """Absolute, normalized ``path`` against the working directory.

        Symlinks are not followed.
        """

        return Path(os.path.abspath(self.workdir / path))

    def output_dir(self) -> Path:
        """Directory the generation step writes to."""

        return self.resolve(self.generation.resolved_dest())

    def deploy_dir(self) -> Path:
        """Directory the deploy step publishes from."""

        return self.resolve(self.deploy.base)

    def has_pipeline(self, name: str) -> bool:
        return name in self.pipelines


__all__ = ["TASK_NAMES", "Config"]
