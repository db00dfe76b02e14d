"""Task orchestrator: run named pipelines step by step.

Each step runs to completion before the next starts. The first failing
step aborts the pipeline and its ``StepFailure`` propagates to the caller;
completed steps are neither retried nor rolled back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Literal, Mapping, Optional

from .checks import issues_for
from .exceptions import ConfigurationError, StepFailure
from .models import Completed, Config
from .tasks import Task, default_registry

logger = logging.getLogger(__name__)

Status = Literal["pending", "running", "completed", "failed"]
StepCallback = Callable[[int, int, str], None]


@dataclass
class RunReport:
    """Progress of one pipeline run."""

    pipeline: str
    planned: List[str]
    status: Status = "pending"
    completed: List[str] = field(default_factory=list)
    current: Optional[str] = None
    failed_step: Optional[str] = None
    results: Dict[str, Completed] = field(default_factory=dict)


def _check_result(step: str, result: Completed) -> None:
    """Raise StepFailure if the collaborator exited nonzero."""
    if result.returncode != 0:
        raise StepFailure(
            step,
            "collaborator reported failure",
            result.returncode,
            result.stderr.decode("utf-8", "ignore"),
        )


class Orchestrator:
    """Runs the pipelines of one configuration against a task registry."""

    def __init__(self, config: Config, registry: Optional[Mapping[str, Task]] = None):
        self.config = config
        self.registry = dict(registry) if registry is not None else default_registry()
        self.report: Optional[RunReport] = None

    def pipelines(self) -> Dict[str, List[str]]:
        return {name: list(steps) for name, steps in self.config.pipelines.items()}

    def plan(self, pipeline_name: str) -> List[str]:
        """Return the step sequence of ``pipeline_name`` without running it."""
        steps = self.config.pipelines.get(pipeline_name)
        if steps is None:
            raise ConfigurationError(f"unknown task: {pipeline_name}")
        for step in steps:
            if step not in self.registry:
                raise ConfigurationError(
                    f"unknown task: {step} (in pipeline {pipeline_name})"
                )
        return list(steps)

    def run(
        self, pipeline_name: str, on_step: Optional[StepCallback] = None
    ) -> RunReport:
        """Run ``pipeline_name``; raise on the first failing step."""
        steps = self.plan(pipeline_name)
        report = RunReport(pipeline=pipeline_name, planned=steps)
        self.report = report

        for issue in issues_for(self.config, steps):
            logger.warning("%s", issue)

        logger.info("Running pipeline %s: %s", pipeline_name, " → ".join(steps))
        report.status = "running"
        for index, step in enumerate(steps, start=1):
            report.current = step
            if on_step is not None:
                on_step(index, len(steps), step)
            try:
                result = self.registry[step].execute(self.config)
                _check_result(step, result)
            except (StepFailure, ConfigurationError):
                self._fail(report, step)
                raise
            except OSError as e:
                self._fail(report, step)
                raise StepFailure(step, str(e)) from e
            report.results[step] = result
            report.completed.append(step)
            logger.info("Step %s completed", step)

        report.current = None
        report.status = "completed"
        logger.info("Pipeline %s completed", pipeline_name)
        return report

    def _fail(self, report: RunReport, step: str) -> None:
        report.status = "failed"
        report.failed_step = step
        logger.error("Step %s failed; pipeline %s aborted", step, report.pipeline)


def run(
    config: Config,
    pipeline_name: str,
    registry: Optional[Mapping[str, Task]] = None,
) -> RunReport:
    """Run ``pipeline_name`` of ``config`` with the default task registry."""
    return Orchestrator(config, registry).run(pipeline_name)


__all__ = ["Orchestrator", "RunReport", "run"]
