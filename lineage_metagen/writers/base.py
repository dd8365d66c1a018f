"""Shared plumbing for event writers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..errors import MetadataWriteError
from ..models import RunEvent

logger = logging.getLogger(__name__)


class BaseWriter:
    """Protocol-like base class for writers.

    Subclasses implement ``_write`` against an already-created parent
    directory; any ``OSError`` it raises is reported as a
    :class:`MetadataWriteError` naming the destination.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def write(self, events: Iterable[RunEvent]) -> int:
        rows: List[RunEvent] = list(events)
        logger.info("Writing %d events to %s", len(rows), self.path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write(rows)
        except OSError as exc:
            raise MetadataWriteError(self.path, exc) from exc
        return len(rows)

    def _write(self, events: List[RunEvent]) -> None:  # pragma: no cover - interface only
        raise NotImplementedError
