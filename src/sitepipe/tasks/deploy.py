"""Deploy step: publish the generated site to a gh-pages branch.

Files under ``base`` are selected with ``src`` glob patterns, matched the
way minimatch does: ``*`` and ``?`` stay inside one path segment, ``**/``
spans zero or more directories and ``**`` alone selects everything. A
leading ``!`` excludes. Paths with a dot-prefixed component are skipped
unless ``dotfiles`` is set. When the selection is the whole tree, ``base``
is published directly; otherwise the selection is staged into a temporary
directory first.
"""

from __future__ import annotations

import logging
import re
import shutil
import tempfile
from functools import lru_cache
from pathlib import Path
from typing import List

from ..exceptions import StepFailure
from ..models import Completed, Config, DeployConfig
from .base import run_command

logger = logging.getLogger(__name__)


def default_command(deploy: DeployConfig) -> List[str]:
    """ghp-import argv template for ``deploy``."""
    argv = [
        "ghp-import",
        "--no-jekyll",
        "--branch",
        "${params.branch}",
        "--remote",
        "${params.remote}",
        "--message",
        "${params.message}",
    ]
    if deploy.push:
        argv.append("--push")
    argv.append("${params.base}")
    return argv


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern[str]:
    """Translate a glob pattern into a regex over POSIX relative paths."""
    out = []
    i, n = 0, len(pattern)
    while i < n:
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
            continue
        if pattern.startswith("**", i):
            out.append(".*")
            i += 2
            continue
        c = pattern[i]
        if c == "*":
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "[" and pattern.find("]", i + 2) != -1:
            end = pattern.find("]", i + 2)
            body = pattern[i + 1 : end].replace("\\", "\\\\")
            if body.startswith("!"):
                body = "^" + body[1:]
            out.append("[" + body + "]")
            i = end + 1
            continue
        else:
            out.append(re.escape(c))
        i += 1
    return re.compile("".join(out) + r"\Z")


def _matches(rel: str, pattern: str) -> bool:
    return _compile(pattern).match(rel) is not None


def _is_hidden(rel: Path) -> bool:
    return any(part.startswith(".") for part in rel.parts)


def select_files(base: Path, patterns: List[str], dotfiles: bool = False) -> List[Path]:
    """Return files under ``base`` (relative paths, sorted) matching ``patterns``."""
    include = [p for p in patterns if not p.startswith("!")]
    exclude = [p[1:] for p in patterns if p.startswith("!")]

    selected = []
    for path in sorted(base.rglob("*")):
        if not path.is_file():
            continue
        rel = path.relative_to(base)
        if not dotfiles and _is_hidden(rel):
            continue
        key = rel.as_posix()
        if not any(_matches(key, p) for p in include):
            continue
        if any(_matches(key, p) for p in exclude):
            continue
        selected.append(rel)
    return selected


def _all_files(base: Path) -> List[Path]:
    return sorted(p.relative_to(base) for p in base.rglob("*") if p.is_file())


class DeployTask:
    """Publish the site directory with the configured publisher (``ghp-import``)."""

    name = "deploy"

    def execute(self, config: Config) -> Completed:
        deploy = config.deploy
        base = config.deploy_dir()

        if not base.is_dir():
            raise StepFailure(self.name, f"base directory not found: {base}")

        selected = select_files(base, deploy.src, deploy.dotfiles)
        if not selected:
            raise StepFailure(
                self.name,
                f"no files in {base} match {', '.join(deploy.src)}",
            )

        template = deploy.command or default_command(deploy)
        if selected == _all_files(base):
            return self._publish(config, template, base)

        logger.info("deploy: staging %d selected file(s)", len(selected))
        with tempfile.TemporaryDirectory(prefix="sitepipe-deploy-") as staging:
            root = Path(staging)
            for rel in selected:
                target = root / rel
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(base / rel, target)
            return self._publish(config, template, root)

    def _publish(self, config: Config, template: List[str], base: Path) -> Completed:
        deploy = config.deploy
        params = {
            "base": str(base),
            "branch": deploy.branch,
            "remote": deploy.remote,
            "message": deploy.message,
        }
        return run_command(self.name, template, params, cwd=config.workdir)
