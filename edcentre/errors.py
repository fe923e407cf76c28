from __future__ import annotations

from pathlib import Path


class PersistenceError(RuntimeError):
    """The data file could not be written."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause
