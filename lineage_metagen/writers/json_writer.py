"""Writer that exports lineage events as a single JSON array."""

from __future__ import annotations

import json
from typing import List

from ..models import RunEvent
from .base import BaseWriter


class JSONWriter(BaseWriter):
    def _write(self, events: List[RunEvent]) -> None:
        with self.path.open("w", encoding="utf-8") as fp:
            json.dump([event.to_dict() for event in events], fp, indent=2)
            fp.write("\n")
