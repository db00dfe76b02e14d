"""Result models shared by tasks and drivers."""

from __future__ import annotations

from pydantic import BaseModel


class Completed(BaseModel):
    """Result of a task or subprocess execution."""

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


__all__ = ["Completed"]
