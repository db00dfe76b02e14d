"""Exec driver: spawn processes with argv (no shell)."""

import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, Optional, Sequence

from ..models import Completed

logger = logging.getLogger(__name__)


def check_argv(argv: Sequence[str], template: Optional[Sequence[str]] = None) -> None:
    """Reject an empty argv or blank arguments.

    When ``template`` is given, the error names the template item that
    rendered blank, e.g. ``argument 3 ('${params.title}') is empty``.

    Raises:
        ValueError: If argv is empty or an argument is blank
    """
    if not argv:
        raise ValueError("command must include at least one argument")
    for index, arg in enumerate(argv):
        if not isinstance(arg, str):
            raise TypeError(f"argument {index} must be a string, got {type(arg).__name__}")
        if not arg.strip():
            source = f" ({template[index]!r})" if template is not None else ""
            raise ValueError(f"argument {index}{source} is empty")


def spawn_exec(
    argv: list[str],
    *,
    stdin: Optional[bytes] = None,
    env: Optional[Dict[str, str]] = None,
    cwd: Optional[Path | str] = None,
) -> Completed:
    """
    Execute a command with argv (no shell).

    Args:
        argv: Command and arguments as a list
        stdin: Optional input bytes
        env: Optional environment variables (merged with os.environ)
        cwd: Optional working directory

    Returns:
        Completed with returncode, stdout, stderr

    Raises:
        ValueError: If argv fails ``check_argv``
        FileNotFoundError: If the executable cannot be found
    """
    check_argv(argv)
    final_env = None if env is None else {**os.environ, **env}

    logger.debug("exec %s (cwd=%s)", argv, cwd)
    result = subprocess.run(
        argv,
        input=stdin,
        capture_output=True,
        check=False,
        cwd=cwd,
        env=final_env,
    )

    return Completed(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )
