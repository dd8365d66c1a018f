"""Translate a bytes-per-event target into dataset and schema field counts."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .errors import MetadataConfigError

# Approximate serialized cost of each part of an event, calibrated against
# the JSON rendering of a START event.
BYTES_PER_RUN = 578
BYTES_PER_JOB = 58
BYTES_PER_FIELD_IN_SCHEMA = 256

DEFAULT_INPUTS_PER_EVENT = 4
DEFAULT_OUTPUTS_PER_EVENT = 2
DEFAULT_NUM_OF_FIELDS_IN_SCHEMA_PER_EVENT = 16

DEFAULT_RUNS = 25

DEFAULT_BYTES_PER_INPUT = BYTES_PER_FIELD_IN_SCHEMA * DEFAULT_NUM_OF_FIELDS_IN_SCHEMA_PER_EVENT
DEFAULT_BYTES_PER_OUTPUT = BYTES_PER_FIELD_IN_SCHEMA * DEFAULT_NUM_OF_FIELDS_IN_SCHEMA_PER_EVENT

DEFAULT_BYTES_PER_EVENT = (
    BYTES_PER_RUN
    + BYTES_PER_JOB
    + DEFAULT_BYTES_PER_INPUT * DEFAULT_INPUTS_PER_EVENT
    + DEFAULT_BYTES_PER_OUTPUT * DEFAULT_OUTPUTS_PER_EVENT
)

MIN_BYTES_PER_EVENT = BYTES_PER_RUN + BYTES_PER_JOB


@dataclass(frozen=True)
class SizeBudget:
    num_inputs: int
    num_outputs: int
    num_fields_for_inputs: int
    num_fields_for_outputs: int

    @property
    def num_datasets(self) -> int:
        return self.num_inputs + self.num_outputs


def total_io_for(bytes_per_event: int) -> int:
    """Return how many inputs and outputs fill ``bytes_per_event``.

    Bytes per event:
    +------------+-----------+-------------------+
    |  run meta  |  job meta |      I/O meta     |
    +------------+-----------+-------------------+
    |->  578B  <-|->  58B  <-|->  (F x N) x P  <-|
    where F is the bytes per schema field, N the number of fields per schema
    and P the number of inputs and outputs per event.

    Above ``DEFAULT_BYTES_PER_EVENT`` this is always at least
    ``DEFAULT_INPUTS_PER_EVENT + DEFAULT_OUTPUTS_PER_EVENT``.
    """

    return (bytes_per_event - BYTES_PER_RUN - BYTES_PER_JOB) // (
        DEFAULT_NUM_OF_FIELDS_IN_SCHEMA_PER_EVENT * BYTES_PER_FIELD_IN_SCHEMA
    )


def validate_size_request(
    runs: int,
    bytes_per_event: int,
    inputs_per_event: int,
    bytes_per_input: int,
    outputs_per_event: int,
    bytes_per_output: int,
) -> None:
    """Reject parameters that would yield negative or degenerate counts.

    Runs once per batch, before any entity is built.
    """

    params = {
        "runs": runs,
        "bytes_per_event": bytes_per_event,
        "inputs_per_event": inputs_per_event,
        "bytes_per_input": bytes_per_input,
        "outputs_per_event": outputs_per_event,
        "bytes_per_output": bytes_per_output,
    }
    negative = [name for name, value in params.items() if value < 0]
    if negative:
        raise MetadataConfigError(f"Parameters must be non-negative: {', '.join(negative)}")

    if bytes_per_event < MIN_BYTES_PER_EVENT:
        raise MetadataConfigError(
            f"bytes_per_event={bytes_per_event} is below the run and job overhead "
            f"of {MIN_BYTES_PER_EVENT} bytes"
        )


def resolve_size_budget(
    rng: random.Random,
    bytes_per_event: int,
    inputs_per_event: int = DEFAULT_INPUTS_PER_EVENT,
    outputs_per_event: int = DEFAULT_OUTPUTS_PER_EVENT,
) -> SizeBudget:
    """Resolve the I/O and schema field counts for one event.

    At or below ``DEFAULT_BYTES_PER_EVENT`` the configured input and output
    counts are used as given. Above it, the total number of inputs and outputs
    is derived from the byte target and split at random between the two.
    """

    num_inputs = inputs_per_event
    num_outputs = outputs_per_event

    # Same schema size for every input, and for every output, of one event.
    num_fields_for_inputs = rng.randrange(DEFAULT_NUM_OF_FIELDS_IN_SCHEMA_PER_EVENT)
    num_fields_for_outputs = DEFAULT_NUM_OF_FIELDS_IN_SCHEMA_PER_EVENT - num_fields_for_inputs

    if bytes_per_event > DEFAULT_BYTES_PER_EVENT:
        total_io = total_io_for(bytes_per_event)
        num_inputs = rng.randrange(total_io)
        num_outputs = total_io - num_inputs

    return SizeBudget(
        num_inputs=num_inputs,
        num_outputs=num_outputs,
        num_fields_for_inputs=num_fields_for_inputs,
        num_fields_for_outputs=num_fields_for_outputs,
    )


def estimate_event_bytes(budget: SizeBudget) -> int:
    """Approximate serialized size of a START event built from ``budget``."""

    field_bytes = BYTES_PER_FIELD_IN_SCHEMA * (
        budget.num_inputs * budget.num_fields_for_inputs
        + budget.num_outputs * budget.num_fields_for_outputs
    )
    return BYTES_PER_RUN + BYTES_PER_JOB + field_bytes
