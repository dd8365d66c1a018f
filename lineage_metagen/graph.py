"""Builders for the run, job and dataset entities of a single event pair."""

from __future__ import annotations

import datetime as dt
from typing import Tuple

from .models import Dataset, Job, NominalTimeFacet, ParentRunFacet, Run, SchemaField
from .utils.ids import IdGenerator

NOMINAL_RUN_DURATION = dt.timedelta(hours=1)


def new_run(ids: IdGenerator, namespace: str, now: dt.datetime, has_parent_run: bool) -> Run:
    """Return a new run, attached to a synthetic parent run when ``has_parent_run``."""

    run_id = ids.new_run_id()
    parent = new_parent_run(ids, namespace) if has_parent_run else None
    return Run(
        run_id=run_id,
        nominal_time=NominalTimeFacet(
            nominal_start_time=now,
            nominal_end_time=now + NOMINAL_RUN_DURATION,
        ),
        parent=parent,
    )


def new_parent_run(ids: IdGenerator, namespace: str) -> ParentRunFacet:
    return ParentRunFacet(
        run_id=ids.new_run_id(),
        job_namespace=namespace,
        job_name=ids.new_job_name(),
    )


def new_job(ids: IdGenerator, namespace: str) -> Job:
    return Job(namespace=namespace, name=ids.new_job_name())


def new_inputs(
    ids: IdGenerator,
    namespace: str,
    num_inputs: int,
    num_fields: int,
    bytes_per_input: int | None = None,
) -> Tuple[Dataset, ...]:
    # bytes_per_input is accepted but does not size the schema yet; every
    # input shares the same field count.
    return tuple(new_dataset(ids, namespace, num_fields) for _ in range(num_inputs))


def new_outputs(
    ids: IdGenerator,
    namespace: str,
    num_outputs: int,
    num_fields: int,
    bytes_per_output: int | None = None,
) -> Tuple[Dataset, ...]:
    return tuple(new_dataset(ids, namespace, num_fields) for _ in range(num_outputs))


def new_dataset(ids: IdGenerator, namespace: str, num_fields: int) -> Dataset:
    name = ids.new_dataset_name()
    return Dataset(namespace=namespace, name=name, fields=new_dataset_fields(ids, num_fields))


def new_dataset_fields(ids: IdGenerator, num_fields: int) -> Tuple[SchemaField, ...]:
    fields = []
    for _ in range(num_fields):
        name = ids.new_field_name()
        field_type = ids.new_field_type()
        description = ids.new_description()
        fields.append(SchemaField(name=name, type=field_type, description=description))
    return tuple(fields)
