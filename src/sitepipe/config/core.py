"""Configuration loading: config file or built-in variant."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..exceptions import ConfigurationError
from ..home import load_json, resolve_config_path
from ..models import Config
from .variants import DEFAULT_VARIANT, get_variant

logger = logging.getLogger(__name__)


def load_file(path: Path, workdir: Optional[Path] = None) -> Config:
    """Load and validate a JSON config file.

    A relative ``workdir`` in the file is taken relative to the file's
    directory; when absent, ``workdir`` (or the file's directory) is used.
    """
    try:
        data = load_json(path)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config {path} must contain a JSON object")

    if "workdir" in data:
        data["workdir"] = str(path.parent / data["workdir"])
    else:
        data["workdir"] = str(workdir or path.parent)

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config {path}:\n{e}") from e


def load(
    path: Path | str | None = None,
    *,
    variant: str | None = None,
    workdir: Path | str | None = None,
) -> Config:
    """Build the configuration once at start-up.

    Uses the first config file found by ``resolve_config_path``; otherwise
    the named built-in variant (``grunt`` by default).
    """
    base = Path(workdir) if workdir is not None else Path.cwd()
    target = resolve_config_path(
        Path(path) if path is not None else None, workdir=base
    )
    if target is not None:
        logger.info("Loading config from %s", target)
        return load_file(target, workdir=Path(workdir) if workdir else None)

    name = variant or DEFAULT_VARIANT
    logger.info("Using built-in variant %r (workdir=%s)", name, base)
    return get_variant(name, base)


__all__ = ["load", "load_file"]
