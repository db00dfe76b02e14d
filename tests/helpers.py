"""Shared helpers: fake collaborators and task doubles."""

from __future__ import annotations

from sitepipe.exceptions import StepFailure
from sitepipe.models import Completed, Config

# Copies argv[1] (book source) into argv[2] (site output).
GENERATE_SCRIPT = (
    "import pathlib, shutil, sys; "
    "shutil.copytree(sys.argv[1], sys.argv[2], dirs_exist_ok=True); "
    "(pathlib.Path(sys.argv[2]) / 'index.html').write_text('<h1>built</h1>')"
)

# Copies argv[1] (publish base) into argv[2] (stand-in for the gh-pages branch).
PUBLISH_SCRIPT = (
    "import shutil, sys; "
    "shutil.rmtree(sys.argv[2], ignore_errors=True); "
    "shutil.copytree(sys.argv[1], sys.argv[2]); "
    "print('published')"
)

FAIL_SCRIPT = "import sys; sys.stderr.write('boom\\n'); sys.exit(3)"


class RecordingTask:
    """Task double that records its invocations into a shared journal."""

    def __init__(self, name, journal, fail=False, returncode=0):
        self.name = name
        self.journal = journal
        self.fail = fail
        self.returncode = returncode

    def execute(self, config):
        self.journal.append(self.name)
        if self.fail:
            raise StepFailure(self.name, "simulated failure")
        return Completed(returncode=self.returncode)


def with_commands(config: Config, generate=None, publish=None) -> Config:
    """Copy ``config`` with the collaborator commands swapped for fakes."""
    update = {}
    if generate is not None:
        update["generation"] = config.generation.model_copy(
            update={"command": generate}
        )
    if publish is not None:
        update["deploy"] = config.deploy.model_copy(update={"command": publish})
    return config.model_copy(update=update)
