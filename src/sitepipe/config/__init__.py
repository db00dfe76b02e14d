"""Config layer facade: loading, built-in variants, templates."""

from ..models import Config
from .core import load, load_file
from .utils import render_command, substitute_template
from .variants import (
    DEFAULT_VARIANT,
    VARIANTS,
    book_variant,
    get_variant,
    grunt_variant,
)

__all__ = [
    "DEFAULT_VARIANT",
    "VARIANTS",
    "Config",
    "book_variant",
    "get_variant",
    "grunt_variant",
    "load",
    "load_file",
    "render_command",
    "substitute_template",
]
