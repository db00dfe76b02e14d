"""sitepipe: ordered build pipelines for a documentation site (clean → build → publish)."""

__all__ = ["__version__"]

__version__ = "0.1.0"
