"""Generation step: build the documentation site with an external generator."""

from __future__ import annotations

import logging

from ..exceptions import StepFailure
from ..models import Completed, Config
from .base import run_command

logger = logging.getLogger(__name__)


class GenerationTask:
    """Run the configured generator (``gitbook build`` by default)."""

    name = "generation"

    def execute(self, config: Config) -> Completed:
        gen = config.generation
        source = config.resolve(gen.input)
        dest = config.output_dir()

        if not source.is_dir():
            raise StepFailure(self.name, f"source directory not found: {source}")

        dest.parent.mkdir(parents=True, exist_ok=True)

        params = {
            "input": str(source),
            "dest": str(dest),
            "format": gen.format,
            "title": gen.title,
            "description": gen.description,
            "github": gen.github,
        }
        result = run_command(self.name, gen.command, params, cwd=config.workdir)
        if result.ok:
            logger.info("generation: wrote %s", dest)
        return result
