"""sitepipe context for passing state between commands."""

import logging
from pathlib import Path
from typing import Optional

import click

from . import config as config_layer
from .models import Config

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure the ``sitepipe`` logger (DEBUG with --verbose, else WARNING)."""
    logging.basicConfig(format=LOG_FORMAT)
    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("sitepipe").setLevel(level)


class SitepipeContext:
    def __init__(self):
        self.config_path: Optional[Path] = None
        self.variant: Optional[str] = None
        self.workdir: Optional[Path] = None
        self._config: Optional[Config] = None

    def load_config(self) -> Config:
        """Build the configuration once per invocation."""
        if self._config is None:
            self._config = config_layer.load(
                self.config_path, variant=self.variant, workdir=self.workdir
            )
        return self._config


pass_context = click.make_pass_decorator(SitepipeContext, ensure=True)
