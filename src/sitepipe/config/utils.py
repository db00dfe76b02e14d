"""Template helpers for collaborator argv."""

import os
import re
from typing import Dict, Optional

PLACEHOLDER = re.compile(r"\$\{(params|env)\.([^}]+)\}")


def substitute_template(
    text: str,
    params: Optional[Dict[str, str]] = None,
    env: Optional[Dict[str, str]] = None,
) -> str:
    """Substitute ${params.*} and ${env.*} placeholders in text.

    Args:
        text: Text containing placeholders like ${params.key} or ${env.KEY}
        params: Dictionary of parameter values
        env: Dictionary of environment variables (defaults to os.environ)

    Returns:
        Text with placeholders substituted

    Raises:
        KeyError: If a referenced param or env var is not found. The
            message names the template text and, for params, the keys
            that are available.
    """
    params = params or {}
    env = env if env is not None else dict(os.environ)

    def replace(match):
        namespace, key = match.groups()
        if namespace == "params":
            if key not in params:
                available = ", ".join(sorted(params)) or "none"
                raise KeyError(
                    f"Parameter not found: {key} in {text!r} (available: {available})"
                )
            return params[key]
        if key not in env:
            raise KeyError(f"Environment variable not found: {key} in {text!r}")
        return env[key]

    return PLACEHOLDER.sub(replace, text)


def render_command(
    template: list[str],
    params: Dict[str, str],
    env: Optional[Dict[str, str]] = None,
) -> list[str]:
    """Substitute placeholders in every argv item."""
    return [substitute_template(arg, params, env) for arg in template]


__all__ = ["render_command", "substitute_template"]
