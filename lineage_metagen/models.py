"""Immutable lineage entities and their OpenLineage JSON rendering."""

from __future__ import annotations

import datetime as dt
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

DEFAULT_PRODUCER = "urn:lineage-metagen"
RUN_EVENT_SCHEMA_URL = "https://openlineage.io/spec/2-0-2/OpenLineage.json#/$defs/RunEvent"
NOMINAL_TIME_FACET_SCHEMA_URL = (
    "https://openlineage.io/spec/facets/1-0-0/NominalTimeRunFacet.json#/$defs/NominalTimeRunFacet"
)
PARENT_RUN_FACET_SCHEMA_URL = (
    "https://openlineage.io/spec/facets/1-0-0/ParentRunFacet.json#/$defs/ParentRunFacet"
)
SCHEMA_DATASET_FACET_SCHEMA_URL = (
    "https://openlineage.io/spec/facets/1-0-0/SchemaDatasetFacet.json#/$defs/SchemaDatasetFacet"
)

EventRecord = Dict[str, Any]


class EventType(str, Enum):
    START = "START"
    COMPLETE = "COMPLETE"


def _facet(producer: str, schema_url: str, **values: Any) -> Dict[str, Any]:
    return {"_producer": producer, "_schemaURL": schema_url, **values}


@dataclass(frozen=True)
class Job:
    namespace: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"namespace": self.namespace, "name": self.name}


@dataclass(frozen=True)
class ParentRunFacet:
    run_id: uuid.UUID
    job_namespace: str
    job_name: str

    def to_dict(self, producer: str) -> Dict[str, Any]:
        return _facet(
            producer,
            PARENT_RUN_FACET_SCHEMA_URL,
            run={"runId": str(self.run_id)},
            job={"namespace": self.job_namespace, "name": self.job_name},
        )


@dataclass(frozen=True)
class NominalTimeFacet:
    nominal_start_time: dt.datetime
    nominal_end_time: dt.datetime

    def to_dict(self, producer: str) -> Dict[str, Any]:
        return _facet(
            producer,
            NOMINAL_TIME_FACET_SCHEMA_URL,
            nominalStartTime=self.nominal_start_time.isoformat(),
            nominalEndTime=self.nominal_end_time.isoformat(),
        )


@dataclass(frozen=True)
class Run:
    run_id: uuid.UUID
    nominal_time: NominalTimeFacet
    parent: Optional[ParentRunFacet] = None

    def to_dict(self, producer: str) -> Dict[str, Any]:
        facets: Dict[str, Any] = {}
        if self.parent is not None:
            facets["parent"] = self.parent.to_dict(producer)
        facets["nominalTime"] = self.nominal_time.to_dict(producer)
        return {"runId": str(self.run_id), "facets": facets}


@dataclass(frozen=True)
class SchemaField:
    name: str
    type: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type, "description": self.description}


@dataclass(frozen=True)
class Dataset:
    namespace: str
    name: str
    fields: Tuple[SchemaField, ...] = ()

    def to_dict(self, producer: str) -> Dict[str, Any]:
        return {
            "namespace": self.namespace,
            "name": self.name,
            "facets": {
                "schema": _facet(
                    producer,
                    SCHEMA_DATASET_FACET_SCHEMA_URL,
                    fields=[f.to_dict() for f in self.fields],
                )
            },
        }


@dataclass(frozen=True)
class RunEvent:
    event_type: EventType
    event_time: dt.datetime
    run: Run
    job: Job
    inputs: Tuple[Dataset, ...] = ()
    outputs: Tuple[Dataset, ...] = ()
    producer: str = DEFAULT_PRODUCER
    schema_url: str = RUN_EVENT_SCHEMA_URL

    def to_dict(self) -> EventRecord:
        return {
            "eventType": self.event_type.value,
            "eventTime": self.event_time.isoformat(),
            "run": self.run.to_dict(self.producer),
            "job": self.job.to_dict(),
            "inputs": [d.to_dict(self.producer) for d in self.inputs],
            "outputs": [d.to_dict(self.producer) for d in self.outputs],
            "producer": self.producer,
            "schemaURL": self.schema_url,
        }


@dataclass(frozen=True)
class RunEvents:
    """The ``START`` and ``COMPLETE`` event of a single run."""

    start: RunEvent
    complete: RunEvent

    def __iter__(self):
        yield self.start
        yield self.complete

