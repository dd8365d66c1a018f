"""Writer that exports lineage events to a parquet file."""

from __future__ import annotations

import json
from typing import Any, Dict, List

import pandas as pd

from ..models import RunEvent
from .base import BaseWriter

COLUMNS = [
    "event_type",
    "event_time",
    "run_id",
    "parent_run_id",
    "job_namespace",
    "job_name",
    "num_inputs",
    "num_outputs",
    "event",
]


def _flatten(event: RunEvent) -> Dict[str, Any]:
    parent = event.run.parent
    return {
        "event_type": event.event_type.value,
        "event_time": event.event_time.isoformat(),
        "run_id": str(event.run.run_id),
        "parent_run_id": str(parent.run_id) if parent is not None else None,
        "job_namespace": event.job.namespace,
        "job_name": event.job.name,
        "num_inputs": len(event.inputs),
        "num_outputs": len(event.outputs),
        "event": json.dumps(event.to_dict()),
    }


class ParquetWriter(BaseWriter):
    def _write(self, events: List[RunEvent]) -> None:
        frame = pd.DataFrame([_flatten(event) for event in events], columns=COLUMNS)
        frame.to_parquet(self.path, index=False)
