"""Drivers: process adapters for external collaborators."""

from .exec import check_argv, spawn_exec

__all__ = ["check_argv", "spawn_exec"]
