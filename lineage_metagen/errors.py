"""Exceptions raised by lineage-metagen."""

from __future__ import annotations

from pathlib import Path


class MetadataGenError(Exception):
    """Base class for generator errors."""


class MetadataConfigError(MetadataGenError, ValueError):
    """Raised when generation parameters cannot produce a valid batch."""


class GenerationCancelled(MetadataGenError):
    """Raised when a batch is stopped between runs."""

    def __init__(self, completed_runs: int, requested_runs: int) -> None:
        super().__init__(f"Generation cancelled after {completed_runs} of {requested_runs} runs")
        self.completed_runs = completed_runs
        self.requested_runs = requested_runs


class MetadataWriteError(MetadataGenError, OSError):
    """Raised when a generated batch cannot be written to its destination."""

    def __init__(self, path: str | Path, cause: BaseException) -> None:
        super().__init__(f"Failed to write events to {path}: {cause}")
        self.path = Path(path)
        self.cause = cause
