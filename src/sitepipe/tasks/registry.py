"""Explicit task registry: task name → implementation."""

from __future__ import annotations

from typing import Dict

from .base import Task
from .cleanup import CleanupTask
from .deploy import DeployTask
from .generation import GenerationTask


def default_registry() -> Dict[str, Task]:
    """One implementation per collaborator, keyed by task name."""
    return {
        "cleanup": CleanupTask(),
        "generation": GenerationTask(),
        "deploy": DeployTask(),
    }


__all__ = ["default_registry"]
