"""Cleanup step: remove build cache paths."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..exceptions import StepFailure
from ..models import Completed, Config

logger = logging.getLogger(__name__)


class CleanupTask:
    """Delete each configured path; missing paths are skipped.

    Without ``force``, the working directory itself and paths outside it
    are refused.
    """

    name = "cleanup"

    def execute(self, config: Config) -> Completed:
        workdir = config.resolve(".")
        removed = []
        for raw in config.cleanup.paths:
            path = config.resolve(raw)
            if not config.cleanup.force:
                self._check_safe(path, workdir)
            if self._remove(path):
                removed.append(raw)

        summary = ", ".join(removed) if removed else "nothing to remove"
        return Completed(returncode=0, stdout=f"cleanup: {summary}\n".encode())

    def _check_safe(self, path: Path, workdir: Path) -> None:
        if path == workdir:
            raise StepFailure(
                self.name, f"refusing to delete the working directory: {path}"
            )
        if workdir not in path.parents:
            raise StepFailure(
                self.name,
                f"refusing to delete outside the working directory: {path} "
                "(set force to override)",
            )

    def _remove(self, path: Path) -> bool:
        if not path.exists() and not path.is_symlink():
            logger.debug("cleanup: %s does not exist", path)
            return False
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as e:
            raise StepFailure(self.name, f"cannot remove {path}: {e}") from e
        logger.info("cleanup: removed %s", path)
        return True
