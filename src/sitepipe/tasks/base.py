"""Task capability shared by every pipeline step."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Protocol

from ..config.utils import render_command
from ..drivers import check_argv, spawn_exec
from ..exceptions import ConfigurationError, StepFailure
from ..models import Completed, Config

logger = logging.getLogger(__name__)


class Task(Protocol):
    """One unit of work delegated to an external collaborator."""

    name: str

    def execute(self, config: Config) -> Completed:
        """Run the step for ``config``; raise ``StepFailure`` on failure."""


def run_command(
    step: str, template: list[str], params: Dict[str, str], cwd: Path
) -> Completed:
    """Render an argv template, validate it, and run it through the exec driver.

    Template problems (unknown placeholder, blank argument) are
    ``ConfigurationError`` and nothing is spawned.
    """
    try:
        argv = render_command(template, params)
        check_argv(argv, template)
    except KeyError as e:
        raise ConfigurationError(f"{step}: {e.args[0]}") from e
    except ValueError as e:
        raise ConfigurationError(f"{step}: {e}") from e

    logger.info("%s: %s", step, " ".join(argv))
    try:
        return spawn_exec(argv, cwd=cwd)
    except FileNotFoundError as e:
        raise StepFailure(step, f"command not found: {argv[0]}") from e
