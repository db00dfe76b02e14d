"""Home layer: config file location and JSON I/O (no Pydantic dependencies)."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_ENV = "SITEPIPE_CONFIG"
CONFIG_FILENAME = "sitepipe.json"


def resolve_config_path(
    cli_path: Optional[Path] = None, workdir: Optional[Path] = None
) -> Optional[Path]:
    """
    Resolve sitepipe.json config file path with precedence:
    1. CLI --config path
    2. SITEPIPE_CONFIG env var
    3. sitepipe.json in the working directory

    Returns None when no file applies; callers then use a built-in variant.
    """
    if cli_path:
        return cli_path

    env = os.getenv(CONFIG_ENV)
    if env:
        return Path(env).expanduser()

    candidate = (workdir or Path.cwd()) / CONFIG_FILENAME
    if candidate.exists():
        return candidate

    return None


def load_json(path: Path) -> Dict[str, Any]:
    """Load and parse JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))
