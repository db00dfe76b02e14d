"""Consistency checks between where generation writes and deploy reads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Tuple

from .models import Config

Level = Literal["error", "warning"]


@dataclass(frozen=True)
class PathIssue:
    """A path inconsistency found in a configuration."""

    code: str
    level: Level
    message: str
    affects: Tuple[str, ...] = ("deploy",)

    def __str__(self) -> str:
        return f"{self.level}: {self.code}: {self.message}"


def path_issues(config: Config) -> List[PathIssue]:
    """Report path problems in ``config``.

    ``deploy-base-mismatch``: deploy would publish something other than the
    generated site. ``stale-output``: the output directory survives cleanup,
    so ``publish`` may ship leftovers from an earlier build.
    """
    issues: List[PathIssue] = []
    output = config.output_dir()
    base = config.deploy_dir()

    if output != base:
        issues.append(
            PathIssue(
                "deploy-base-mismatch",
                "error",
                f"generation writes {output} but deploy publishes {base}",
            )
        )

    cleaned = [config.resolve(p) for p in config.cleanup.paths]
    if not any(output == c or c in output.parents for c in cleaned):
        issues.append(
            PathIssue(
                "stale-output",
                "warning",
                f"output {output} is not removed by cleanup "
                f"({', '.join(config.cleanup.paths)})",
            )
        )

    return issues


def issues_for(config: Config, steps: Iterable[str]) -> List[PathIssue]:
    """Path issues that can affect a run of ``steps``.

    Both checks concern what deploy publishes, so a pipeline without a
    deploy step has none.
    """
    planned = set(steps)
    return [i for i in path_issues(config) if planned.intersection(i.affects)]


def resolved_paths(config: Config) -> Dict[str, str]:
    """Path-valued settings of ``config`` relative to its working directory."""

    def rel(path) -> str:
        try:
            return path.relative_to(config.resolve(".")).as_posix()
        except ValueError:
            return str(path)

    return {
        "generation.input": rel(config.resolve(config.generation.input)),
        "generation.dest": rel(config.output_dir()),
        "deploy.base": rel(config.deploy_dir()),
        "cleanup.paths": ", ".join(
            rel(config.resolve(p)) for p in config.cleanup.paths
        ),
    }


def compare_variants(a: Config, b: Config) -> Dict[str, Tuple[str, str]]:
    """Return the path settings whose resolved values differ between ``a`` and ``b``."""
    left = resolved_paths(a)
    right = resolved_paths(b)
    return {key: (left[key], right[key]) for key in left if left[key] != right[key]}


def has_errors(issues: List[PathIssue]) -> bool:
    return any(issue.level == "error" for issue in issues)


__all__ = [
    "PathIssue",
    "compare_variants",
    "has_errors",
    "issues_for",
    "path_issues",
    "resolved_paths",
]
