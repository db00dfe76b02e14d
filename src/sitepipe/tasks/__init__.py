"""Pipeline tasks and their registry."""

from .base import Task
from .cleanup import CleanupTask
from .deploy import DeployTask, select_files
from .generation import GenerationTask
from .registry import default_registry

__all__ = [
    "CleanupTask",
    "DeployTask",
    "GenerationTask",
    "Task",
    "default_registry",
    "select_files",
]
