"""Built-in named configurations for the Scala Tour book.

The two variants disagree on where the generated site lives:
``grunt`` builds into ``.grunt/gitbook/site`` (inside the cleaned cache),
``book`` relies on the generator default ``_book``. Both are kept as-is;
``sitepipe check`` reports what each implies.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict

from ..exceptions import ConfigurationError
from ..models import CleanupConfig, Config, DeployConfig, GenerationConfig

TITLE = "Scala Tour"
DESCRIPTION = "My location for adding scala findings"
GITHUB = "dcapwell/scala-tour"
CACHE_DIR = ".grunt"
SITE_DIR = ".grunt/gitbook/site"


def grunt_variant(workdir: Path) -> Config:
    """Build into the ``.grunt`` cache and publish from there.

    ``dest`` is absolute, anchored to ``workdir``; ``deploy.base`` is the
    same directory spelled relative to it.
    """
    root = Path(os.path.abspath(workdir))
    return Config(
        name="grunt",
        workdir=root,
        generation=GenerationConfig(
            input="./src",
            dest=str(root / SITE_DIR),
            format="site",
            title=TITLE,
            description=DESCRIPTION,
            github=GITHUB,
        ),
        deploy=DeployConfig(base=SITE_DIR, src=["**"]),
        cleanup=CleanupConfig(paths=[CACHE_DIR]),
    )


def book_variant(workdir: Path) -> Config:
    """Build into the generator default directory and publish ``_book``."""
    return Config(
        name="book",
        workdir=workdir,
        generation=GenerationConfig(
            input="./src",
            format="site",
            title=TITLE,
            description=DESCRIPTION,
            github=GITHUB,
        ),
        deploy=DeployConfig(base="_book", src=["**"]),
        cleanup=CleanupConfig(paths=[CACHE_DIR]),
    )


VARIANTS: Dict[str, Callable[[Path], Config]] = {
    "grunt": grunt_variant,
    "book": book_variant,
}

DEFAULT_VARIANT = "grunt"


def get_variant(name: str, workdir: Path) -> Config:
    """Return the built-in configuration called ``name``."""
    factory = VARIANTS.get(name)
    if factory is None:
        raise ConfigurationError(
            f"Unknown configuration variant: {name} "
            f"(available: {', '.join(sorted(VARIANTS))})"
        )
    return factory(workdir)


__all__ = [
    "DEFAULT_VARIANT",
    "VARIANTS",
    "book_variant",
    "get_variant",
    "grunt_variant",
]
