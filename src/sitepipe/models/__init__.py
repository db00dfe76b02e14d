"""Pydantic models for sitepipe configuration."""

from .config import TASK_NAMES, Config
from .errors import Completed
from .tasks import DEFAULT_BOOK_DIR, CleanupConfig, DeployConfig, GenerationConfig

__all__ = [
    "DEFAULT_BOOK_DIR",
    "TASK_NAMES",
    "CleanupConfig",
    "Completed",
    "Config",
    "DeployConfig",
    "GenerationConfig",
]
