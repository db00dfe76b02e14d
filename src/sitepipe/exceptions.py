"""sitepipe exceptions."""

from dataclasses import dataclass
from typing import Optional


class SitepipeError(Exception):
    """Base class for sitepipe errors."""


class ConfigurationError(SitepipeError):
    """Unknown pipeline or task, or a malformed configuration."""


@dataclass
class StepFailure(SitepipeError):
    """A collaborator reported failure while running a pipeline step."""

    step: str
    message: str
    returncode: Optional[int] = None
    stderr: Optional[str] = None

    def __str__(self) -> str:
        text = f"{self.step} failed: {self.message}"
        if self.returncode is not None:
            text += f" (exit {self.returncode})"
        if self.stderr:
            text += f"\n{self.stderr.rstrip()}"
        return text
