"""Writer that exports lineage events to JSONL."""

from __future__ import annotations

import json
from typing import List

from ..models import RunEvent
from .base import BaseWriter


class JSONLWriter(BaseWriter):
    def _write(self, events: List[RunEvent]) -> None:
        with self.path.open("w", encoding="utf-8") as fp:
            for event in events:
                fp.write(json.dumps(event.to_dict()))
                fp.write("\n")
